import streamlit as st
from loguru import logger


def log_action(action: str, details: str, actor: str | None = None) -> None:
    if actor is None:
        actor = st.session_state.get("user_name") or "anonymous"

    logger.bind(actor=actor, action=action).info(
        "{} | {} | {}", actor, action, details
    )
