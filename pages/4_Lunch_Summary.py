import streamlit as st

from seat_booking.auth import render_user_sidebar, require_login
from seat_booking.reports import team_summary, week_summary
from seat_booking.session import get_settings, get_store, init_session_defaults

settings = get_settings()
init_session_defaults()
require_login(settings)
render_user_sidebar(settings)

store = get_store()

st.title("Lunch Summary")

df = week_summary(store)

st.dataframe(df, use_container_width=True, hide_index=True)
st.bar_chart(df, x="Day", y="Lunches")

st.caption("Lunches are only reserved for bookings made before the day itself.")

if settings.profile.teams_enabled:
    st.subheader("Bookings by team")

    teams = team_summary(store)
    if teams.empty:
        st.info("No bookings yet.")
    else:
        st.dataframe(teams, use_container_width=True, hide_index=True)
