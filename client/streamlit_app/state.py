"""Session state helpers for Streamlit."""
from __future__ import annotations

import streamlit as st


def init_session_state() -> None:
    defaults = {
        "user_id": None,
        "room_id": None,
        "room_name": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def set_user(user_id: int) -> None:
    st.session_state.user_id = user_id


def set_room(room_id: int, room_name: str) -> None:
    st.session_state.room_id = room_id
    st.session_state.room_name = room_name
