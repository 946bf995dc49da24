import streamlit as st

from seat_booking.auth import render_user_sidebar, require_login
from seat_booking.dates import DAYS_OF_WEEK
from seat_booking.session import get_settings, get_store, init_session_defaults
from seat_booking.styles import apply_lato_font

# ---------------------------------------------------
# STREAMLIT CONFIG
# ---------------------------------------------------
st.set_page_config(page_title="Office Seat Booking", layout="wide")
apply_lato_font()

# ---------------------------------------------------
# SETTINGS + SESSION DEFAULTS
# ---------------------------------------------------
settings = get_settings()
init_session_defaults()

# ---------------------------------------------------
# REQUIRE LOGIN (REVISION C ONLY)
# ---------------------------------------------------
require_login(settings)

# ---------------------------------------------------
# SIDEBAR
# ---------------------------------------------------
render_user_sidebar(settings)

# ---------------------------------------------------
# MAIN APP
# ---------------------------------------------------
store = get_store()

st.title("Office Seat Booking")

user_name = st.session_state.get("user_name")
if user_name:
    st.write(f"Welcome, **{user_name}**.")

st.write("Use the sidebar to book a seat or review this week's lunches.")

st.subheader("This week")

today = store.current_day()
cols = st.columns(len(DAYS_OF_WEEK))

for col, day in zip(cols, DAYS_OF_WEEK):
    label = f"{day} (today)" if day == today else day
    col.metric(
        label,
        f"{store.occupancy(day)}/{settings.seat_count}",
        help=f"Lunches booked: {store.lunch_count(day)}",
    )
