import streamlit as st

from seat_booking.audit import log_action
from seat_booking.auth import render_user_sidebar, require_login
from seat_booking.dates import DAYS_OF_WEEK, next_date_for, uk_date
from seat_booking.layout import grouped_seats
from seat_booking.notices import WARNING
from seat_booking.session import get_settings, get_store, init_session_defaults
from seat_booking.store import Team
from seat_booking.styles import apply_lato_font, apply_seat_grid_styles

st.set_page_config(page_title="Book a Seat", layout="wide")
apply_lato_font()
apply_seat_grid_styles()

# --------------------------------------------------
# AUTH & SESSION
# --------------------------------------------------
settings = get_settings()
init_session_defaults()
require_login(settings)
render_user_sidebar(settings)

store = get_store()
teams_enabled = settings.profile.teams_enabled

st.title("Office Seat Booking")


# --------------------------------------------------
# NOTICES (AUTO-DISMISS)
# --------------------------------------------------
@st.fragment(run_every=1)
def notice_area():
    notice = store.notices.current()
    if notice is None:
        return

    if notice.level == WARNING:
        st.warning(notice.message, icon="⚠️")
    else:
        st.success(notice.message)


notice_area()

# --------------------------------------------------
# DAY SELECTION
# --------------------------------------------------
st.subheader("Select day of the week")

day = st.radio(
    "Day",
    DAYS_OF_WEEK,
    key="selected_day",
    horizontal=True,
    label_visibility="collapsed",
)

st.caption(f"Next {day}: {uk_date(next_date_for(day, store.today()))}")


# --------------------------------------------------
# BOOKING DIALOG
# --------------------------------------------------
DRAFT_KEYS = ["draft_name", "draft_team"]


@st.dialog("Book a seat")
def booking_dialog(day: str, seat: int):
    st.markdown(f"**Seat {seat} for {day}**")

    name = st.text_input(
        "Employee name",
        value=st.session_state.get("user_name") or "",
        placeholder="Enter your name",
        key="draft_name",
    )

    team = None
    if teams_enabled:
        team = st.selectbox(
            "Team",
            list(Team),
            index=None,
            format_func=lambda t: t.label,
            placeholder="Select a team",
            key="draft_team",
        )

    ready = bool(name.strip()) and (team is not None or not teams_enabled)

    col1, col2 = st.columns(2)

    if col1.button("Book seat", type="primary", disabled=not ready):
        result = store.book(day, seat, name, team)
        log_action(
            "BOOKING_ATTEMPT",
            f"day={day}, seat={seat}, name={name.strip()}, "
            f"team={team.value if team else None}, outcome={result.outcome.value}",
        )
        st.rerun()

    if col2.button("Cancel"):
        st.rerun()


def open_booking_dialog(day: str, seat: int) -> None:
    # Fresh draft for every seat click
    for key in DRAFT_KEYS:
        st.session_state.pop(key, None)
    booking_dialog(day, seat)


def cancel_seat(day: str, seat: int) -> None:
    booking = store.cancel(day, seat)
    if booking is not None:
        log_action(
            "BOOKING_CANCELLED",
            f"day={day}, seat={seat}, owner={booking.employee_name}",
        )
    st.rerun()


# --------------------------------------------------
# SEAT GRID
# --------------------------------------------------
def seat_label(seat: int) -> str:
    booking = store.booking_at(day, seat)
    if booking is None:
        return f"🟢 {seat}"

    label = f"🔴 {seat}\n{booking.employee_name}"
    if booking.team is not None:
        label += f"\n{booking.team.label}"
    return label


def render_seats(seats: list[int], per_row: int) -> None:
    for start in range(0, len(seats), per_row):
        cols = st.columns(per_row)

        for col, seat in zip(cols, seats[start:start + per_row]):
            taken = store.is_taken(day, seat)

            clicked = col.button(
                seat_label(seat),
                key=f"seat_{seat}",
                type="primary" if taken else "secondary",
                help="Click to cancel" if taken else "Click to book",
                use_container_width=True,
            )

            if clicked and taken:
                # Occupied seats cancel straight away, no confirmation
                cancel_seat(day, seat)
            elif clicked:
                open_booking_dialog(day, seat)


st.subheader(f"Office spots - {day}")
st.caption("🟢 Available · 🔴 Taken")

if settings.profile.groups_enabled:
    for label, seats in grouped_seats(settings.seat_count, settings.groups):
        st.markdown(f"**{label}**")
        render_seats(seats, per_row=8)
else:
    render_seats(list(range(1, settings.seat_count + 1)), per_row=10)

# --------------------------------------------------
# LUNCH COUNTER
# --------------------------------------------------
st.divider()
st.metric(f"Booked lunches for {day}", store.lunch_count(day))
