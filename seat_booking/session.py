import streamlit as st

from seat_booking.config import Settings, load_settings
from seat_booking.dates import current_day
from seat_booking.notices import NoticeBoard
from seat_booking.store import BookingStore

SETTINGS_KEY = "settings"
STORE_KEY = "booking_store"


def get_settings() -> Settings:
    """
    Settings for this browser session.
    Configuration errors stop the page instead of raising.
    """
    if SETTINGS_KEY not in st.session_state:
        try:
            st.session_state[SETTINGS_KEY] = load_settings()
        except ValueError as e:
            st.error(f"Configuration error: {e}")
            st.stop()

    return st.session_state[SETTINGS_KEY]


def get_store() -> BookingStore:
    if STORE_KEY not in st.session_state:
        settings = get_settings()
        st.session_state[STORE_KEY] = BookingStore(
            settings.profile,
            notices=NoticeBoard(settings.notice_ms),
        )

    return st.session_state[STORE_KEY]


def init_session_defaults() -> None:
    st.session_state.setdefault("user_name", None)
    st.session_state.setdefault("selected_day", current_day())
