import streamlit as st

from seat_booking.auth import render_user_sidebar, require_login
from seat_booking.dates import DAYS_OF_WEEK
from seat_booking.layout import grouped_seats
from seat_booking.session import get_settings, get_store, init_session_defaults

settings = get_settings()
init_session_defaults()
require_login(settings)
render_user_sidebar(settings)

store = get_store()

st.title("Office Map")

if not settings.profile.groups_enabled:
    st.write(f"Single open-plan floor with {settings.seat_count} seats.")
    st.info("Seat groups are not configured for this revision.")
    st.stop()

day = st.selectbox(
    "Day",
    DAYS_OF_WEEK,
    index=DAYS_OF_WEEK.index(st.session_state.selected_day),
)

booked = store.bookings_for(day)

for label, seats in grouped_seats(settings.seat_count, settings.groups):
    taken = sum(1 for seat in seats if seat in booked)

    st.subheader(label)
    st.caption(f"Seats {seats[0]}-{seats[-1]} · {taken}/{len(seats)} taken")
    st.progress(taken / len(seats))
