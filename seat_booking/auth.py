import streamlit as st

from seat_booking.audit import log_action
from seat_booking.config import Settings

SESSION_KEYS = ["user_name", "draft_name", "draft_team"]


def credentials_ok(username: str, password: str) -> bool:
    # Cosmetic gate: any non-empty pair is accepted
    return bool((username or "").strip()) and bool((password or "").strip())


def require_login(settings: Settings) -> None:
    """
    Stop the page until a user name has been captured.

    Only revisions with a login gate ask for credentials. The accepted
    user name pre-fills the booking form and nothing else.
    """
    if not settings.profile.login_required:
        return

    # Already signed in
    if st.session_state.get("user_name"):
        return

    st.title("Office Seat Booking")
    st.markdown("### Sign in")

    username = st.text_input("Username", key="login_username")
    password = st.text_input("Password", type="password", key="login_password")

    if st.button(
        "Sign in",
        key="login_submit",
        type="primary",
        disabled=not credentials_ok(username, password),
    ):
        st.session_state["user_name"] = username.strip()
        log_action("LOGIN", "cosmetic login accepted", actor=username.strip())
        st.rerun()

    st.stop()


def logout() -> None:
    log_action("LOGOUT", "session user cleared")

    for key in SESSION_KEYS:
        st.session_state.pop(key, None)

    st.rerun()


def render_user_sidebar(settings: Settings) -> None:
    user_name = st.session_state.get("user_name")

    st.sidebar.markdown(f"**User:** {user_name or 'Guest'}")
    st.sidebar.markdown(f"**Revision:** {settings.profile.name}")

    if settings.profile.login_required and user_name:
        st.sidebar.divider()
        if st.sidebar.button("Log out"):
            logout()
