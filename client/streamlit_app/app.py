"""Streamlit client for the room chat backend."""
from __future__ import annotations

import requests
import streamlit as st

from api_client import APIClient, get_client
from config import POLL_INTERVAL_SECONDS
from state import init_session_state, set_room, set_user


def show_envelope(res: dict) -> None:
    """Render an envelope; data false/None means the backend refused the request."""
    if res.get("data") in (None, False, 0, []):
        st.warning(res.get("message") or "Request failed")
    else:
        st.success(res.get("message") or "OK")


def remember_registration(res: dict, requested_id: int) -> None:
    """Make the new account current when its id is known to the client."""
    if not res.get("data"):
        return
    if requested_id:
        set_user(requested_id)
    else:
        # the add endpoint does not return the assigned id
        st.info("The ID was assigned by the server. Register with an explicit ID to enter rooms as this user.")


def render_message_log(client: APIClient, room_id: int) -> None:
    try:
        res = client.get_messages(room_id)
    except requests.HTTPError:
        # the backend answers 500 until the first message exists
        st.info("No messages yet.")
        return
    except requests.RequestException as e:
        st.error(f"Could not load messages: {e}")
        return
    for text in res.get("data") or []:
        st.chat_message("user").write(text)


def render_users(client: APIClient):
    st.header("Users")
    col1, col2, col3 = st.columns(3)

    with col1:
        st.subheader("Register")
        with st.form("add_user_form"):
            user_id = st.number_input(
                "ID (0 = assign automatically)",
                min_value=0,
                step=1,
                key="add_id",
                help="Automatically assigned IDs are not shown, so pick one if you want to chat as this user.",
            )
            name = st.text_input("Name", key="add_name")
            password = st.text_input("Password", type="password", key="add_pass")
            if st.form_submit_button("Register"):
                try:
                    res = client.add_user(name, password, int(user_id) or None)
                    show_envelope(res)
                    remember_registration(res, int(user_id))
                except requests.RequestException as e:
                    st.error(f"Register failed: {e}")

    with col2:
        st.subheader("Search")
        with st.form("search_user_form"):
            user_id = st.number_input("ID", min_value=0, step=1, key="search_id")
            if st.form_submit_button("Search"):
                try:
                    res = client.search_user(int(user_id))
                    show_envelope(res)
                    if res.get("data"):
                        st.table(res["data"])
                        set_user(int(user_id))
                except requests.RequestException as e:
                    st.error(f"Search failed: {e}")

    with col3:
        st.subheader("Delete")
        with st.form("delete_user_form"):
            user_id = st.number_input("ID", min_value=0, step=1, key="delete_id")
            name = st.text_input("Name", key="delete_name")
            password = st.text_input("Password", type="password", key="delete_pass")
            if st.form_submit_button("Delete"):
                try:
                    show_envelope(client.delete_user(int(user_id), name, password))
                except requests.RequestException as e:
                    st.error(f"Delete failed: {e}")


def render_rooms(client: APIClient):
    st.header("Rooms")
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Create")
        with st.form("create_room_form"):
            room_name = st.text_input("Room name", key="create_room_name")
            password = st.text_input("Room password", type="password", key="create_room_pass")
            if st.form_submit_button("Create"):
                try:
                    show_envelope(client.create_room(room_name, password))
                except requests.RequestException as e:
                    st.error(f"Create failed: {e}")

    with col2:
        st.subheader("Enter")
        if st.session_state.user_id is None:
            st.info("Register or search a user first.")
            return
        with st.form("enter_room_form"):
            room_id = st.number_input("Room ID", min_value=1, step=1, key="enter_room_id")
            room_name = st.text_input("Room name", key="enter_room_name")
            password = st.text_input("Room password", type="password", key="enter_room_pass")
            if st.form_submit_button("Enter"):
                try:
                    res = client.enter_room(int(room_id), room_name, password, st.session_state.user_id)
                    show_envelope(res)
                    if res.get("data"):
                        set_room(int(room_id), room_name)
                except requests.RequestException as e:
                    st.error(f"Enter failed: {e}")


def render_chat(client: APIClient):
    st.header("Chat")
    if st.session_state.room_id is None:
        st.info("Enter a room first.")
        return

    room_id = st.session_state.room_id
    st.caption(f"Room {room_id} ({st.session_state.room_name}), refreshing every {POLL_INTERVAL_SECONDS:g}s")

    @st.fragment(run_every=POLL_INTERVAL_SECONDS)
    def message_log():
        render_message_log(client, room_id)

    message_log()

    text = st.chat_input("Message")
    if text:
        try:
            res = client.send_message(room_id, text)
            if not res.get("data"):
                st.warning(res.get("message"))
        except requests.RequestException as e:
            st.error(f"Send failed: {e}")


def main():
    st.set_page_config(page_title="Room Chat", layout="wide")
    init_session_state()
    client = get_client()

    page = st.sidebar.radio("Navigation", ["Users", "Rooms", "Chat"])
    if st.session_state.user_id is not None:
        st.sidebar.write(f"User: {st.session_state.user_id}")

    if page == "Users":
        render_users(client)
    elif page == "Rooms":
        render_rooms(client)
    elif page == "Chat":
        render_chat(client)


if __name__ == "__main__":
    main()
