import streamlit as st

from seat_booking.audit import log_action
from seat_booking.auth import render_user_sidebar, require_login
from seat_booking.dates import next_date_for, uk_date
from seat_booking.session import get_settings, get_store, init_session_defaults

# ---------------------------------------------------
# PAGE SETUP
# ---------------------------------------------------
settings = get_settings()
init_session_defaults()
require_login(settings)
render_user_sidebar(settings)

store = get_store()

st.title("My Bookings")

# ---------------------------------------------------
# WHOSE BOOKINGS
# ---------------------------------------------------
if settings.profile.login_required:
    name = st.session_state.user_name
else:
    name = st.text_input(
        "Employee name",
        value=st.session_state.get("user_name") or "",
        placeholder="Enter the name used when booking",
    )

if not (name or "").strip():
    st.info("Enter a name to see its bookings.")
    st.stop()

bookings = store.bookings_by_name(name)

# ---------------------------------------------------
# SHOW BOOKINGS
# ---------------------------------------------------
st.subheader(f"Bookings for {name.strip()}")

if not bookings:
    st.info("No bookings this session.")
    st.stop()

for booking in bookings:
    team = booking.team.label if booking.team else "-"
    booking_date = uk_date(next_date_for(booking.day, store.today()))

    with st.container():
        st.markdown(
            f"""
            **Seat {booking.seat}**
            • Day: **{booking.day}** ({booking_date})
            • Team: **{team}**
            """
        )

        if st.button("Cancel Booking", key=f"cancel_{booking.day}_{booking.seat}"):
            store.cancel(booking.day, booking.seat)
            log_action(
                "BOOKING_CANCELLED",
                f"day={booking.day}, seat={booking.seat}",
            )
            st.rerun()

        st.divider()
