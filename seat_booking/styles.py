import streamlit as st


def apply_lato_font() -> None:
    st.markdown(
        """
        <style>
        @import url('https://fonts.googleapis.com/css2?family=Lato:wght@300;400;600;700&display=swap');

        html, body, [class*="css"] {
          font-family: 'Lato', sans-serif;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def apply_seat_grid_styles() -> None:
    # Seat buttons: square-ish tiles, owner name wraps under the number
    st.markdown(
        """
        <style>
        div[data-testid="stButton"] button[kind="secondary"],
        div[data-testid="stButton"] button[kind="primary"] {
          min-height: 4.5rem;
          white-space: pre-line;
          line-height: 1.2;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
