import streamlit as st

from login.auth_client import restore_session
from store.store import Store
from utils.http import new_session


def init_state() -> None:
    """
    Creates the per-browser-session objects once: the state store, the HTTP
    session (carries the Authorization header) and the token storage, which is
    st.session_state itself.
    """
    if "store" in st.session_state:
        return
    st.session_state["store"] = Store()
    st.session_state["http"] = new_session()
    restore_session(st.session_state["http"], dispatch, st.session_state)


def store() -> Store:
    return st.session_state["store"]


def http():
    return st.session_state["http"]


def dispatch(action):
    return store().dispatch(action)
