# auth_ui.py
import streamlit as st
import login.auth_client as api
from login.auth_state import dispatch, http, store
from store import types as t


def show_errors() -> None:
    for field, msg in store().get_state().errors.items():
        st.error(f"{field}: {msg}")


def login_or_register_panel() -> None:
    tab_login, tab_register = st.tabs(["Log in", "Sign up"])

    with tab_login:
        with st.form("login_form", clear_on_submit=False):
            email = st.text_input("Email", key="login_email")
            password = st.text_input(
                "Password", type="password", key="login_password")
            submitted = st.form_submit_button("Log in")
        if submitted:
            dispatch(t.action(t.CLEAR_ERRORS))
            if api.login_user(http(), dispatch, st.session_state,
                              {"email": email, "password": password}):
                st.rerun()
            show_errors()

    with tab_register:
        with st.form("register_form", clear_on_submit=True):
            name = st.text_input("Name")
            email_r = st.text_input("Email")
            password_r = st.text_input("Password", type="password")
            password2 = st.text_input("Confirm password", type="password")
            submitted_r = st.form_submit_button("Create account")
        if submitted_r:
            dispatch(t.action(t.CLEAR_ERRORS))
            ok = api.register_user(http(), dispatch, {
                "name": name, "email": email_r,
                "password": password_r, "password2": password2,
            })
            if ok:
                st.success("Account created. Log in from the 'Log in' tab.")
            else:
                show_errors()


def require_auth() -> dict:
    """Shows login/register and stops the page until someone is signed in."""
    auth = store().get_state().auth
    if not auth.is_authenticated:
        st.info("Log in (or sign up) to continue.")
        login_or_register_panel()
        st.stop()
    return auth.user


def sidebar_user_box() -> None:
    user = store().get_state().auth.user
    if user.get("avatar"):
        st.sidebar.image(user["avatar"], width=64)
    st.sidebar.caption(f"Signed in as **{user.get('name', '')}**")
    if st.sidebar.button("Log out", use_container_width=True):
        api.logout_user(http(), dispatch, st.session_state)
        st.rerun()
