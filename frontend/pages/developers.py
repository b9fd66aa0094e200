# pages/developers.py
import streamlit as st

from login.auth_state import init_state, dispatch, http, store
from login.auth_ui import show_errors
from store import types as t
import utils.api_profile as api

st.set_page_config(page_title="Developers", layout="wide")
init_state()

st.header("Developers")
st.caption("Browse and connect with developers")
dispatch(t.action(t.CLEAR_ERRORS))

handle = st.text_input("Look up a handle")
if handle:
    api.get_profile_by_handle(http(), dispatch, handle.strip())
    if store().get_state().errors:
        show_errors()
        st.stop()
    found = store().get_state().profile.profile
    if not found:
        st.warning("There is no profile for this handle.")
    else:
        user = found.get("user") or {}
        st.subheader(user.get("name", found.get("handle", "")))
        st.write(found.get("status", ""))
        if found.get("bio"):
            st.write(found["bio"])
        st.write(", ".join(found.get("skills", [])))
    st.stop()

api.get_profiles(http(), dispatch)
if store().get_state().errors:
    show_errors()
    st.stop()
profiles = store().get_state().profile.profiles
if not profiles:
    st.info("No profiles found...")

for p in profiles:
    user = p.get("user") or {}
    c1, c2 = st.columns([1, 5])
    if user.get("avatar"):
        c1.image(user["avatar"], width=72)
    c2.markdown(f"**{user.get('name', '')}** · {p.get('status', '')}"
                + (f" at {p['company']}" if p.get("company") else ""))
    c2.caption(", ".join(p.get("skills", [])[:4]))
