from datetime import date
import streamlit as st

from login.auth_state import init_state, dispatch, http, store
from login.auth_ui import require_auth, show_errors, sidebar_user_box
from store import types as t
import utils.api_profile as api

st.set_page_config(page_title="Dashboard", layout="wide")

init_state()
me = require_auth()
sidebar_user_box()

dispatch(t.action(t.CLEAR_ERRORS))
api.get_current_profile(http(), dispatch)
if store().get_state().errors:
    # backend unreachable or failing: do not offer the create form
    show_errors()
    st.stop()
profile = store().get_state().profile.profile or {}


def _iso(d: date | None) -> str | None:
    return d.isoformat() if d else None


def _period(entry: dict) -> str:
    start = (entry.get("from") or "")[:10]
    end = "Now" if entry.get("current") else (entry.get("to") or "")[:10]
    return f"{start} - {end}"


st.header("Dashboard")
st.caption(f"Welcome {me.get('name', '')}")

# -------------------- Profile --------------------

with st.expander("Edit profile" if profile else "Create profile", expanded=not profile):
    with st.form("profile_form"):
        handle = st.text_input("Handle", value=profile.get("handle") or "")
        status = st.text_input("Status", value=profile.get("status") or "")
        company = st.text_input("Company", value=profile.get("company") or "")
        website = st.text_input("Website", value=profile.get("website") or "")
        location = st.text_input(
            "Location", value=profile.get("location") or "")
        skills = st.text_input("Skills (comma separated)",
                               value=", ".join(profile.get("skills") or []))
        githubusername = st.text_input(
            "GitHub username", value=profile.get("githubusername") or "")
        bio = st.text_area("Bio", value=profile.get("bio") or "")
        social = profile.get("social") or {}
        links = {k: st.text_input(k.capitalize(), value=social.get(k) or "")
                 for k in ("twitter", "facebook", "linkedin", "youtube", "instagram")}
        submitted = st.form_submit_button("Save")
    if submitted:
        dispatch(t.action(t.CLEAR_ERRORS))
        form = {"handle": handle, "status": status, "company": company,
                "website": website, "location": location, "skills": skills,
                "githubusername": githubusername, "bio": bio, **links}
        form = {k: v for k, v in form.items() if v}
        if api.create_profile(http(), dispatch, form):
            st.success("Profile saved")
            st.rerun()
        show_errors()

if not profile:
    st.stop()

# -------------------- Experience --------------------

st.subheader("Experience")
for exp in profile.get("experience", []):
    c1, c2 = st.columns([5, 1])
    c1.write(f"**{exp['title']}** at {exp['company']} ({_period(exp)})")
    if c2.button("Delete", key=f"exp-{exp['id']}"):
        api.delete_experience(http(), dispatch, exp["id"])
        st.rerun()

with st.expander("Add experience"):
    with st.form("experience_form", clear_on_submit=True):
        title = st.text_input("Job title")
        exp_company = st.text_input("Company ")
        exp_location = st.text_input("Location ")
        exp_from = st.date_input("From", value=None)
        exp_current = st.checkbox("Current job", value=True)
        exp_to = st.date_input("To", value=None)
        exp_desc = st.text_area("Description")
        add_exp = st.form_submit_button("Add")
    if add_exp:
        dispatch(t.action(t.CLEAR_ERRORS))
        ok = api.add_experience(http(), dispatch, {
            "title": title, "company": exp_company, "location": exp_location,
            "from": _iso(exp_from), "to": None if exp_current else _iso(exp_to),
            "current": exp_current, "description": exp_desc,
        })
        if ok:
            st.rerun()
        show_errors()

# -------------------- Education --------------------

st.subheader("Education")
for edu in profile.get("education", []):
    c1, c2 = st.columns([5, 1])
    c1.write(f"**{edu['school']}**, {edu['degree']} in {edu['fieldofstudy']} ({_period(edu)})")
    if c2.button("Delete", key=f"edu-{edu['id']}"):
        api.delete_education(http(), dispatch, edu["id"])
        st.rerun()

with st.expander("Add education"):
    with st.form("education_form", clear_on_submit=True):
        school = st.text_input("School")
        degree = st.text_input("Degree")
        field = st.text_input("Field of study")
        edu_from = st.date_input("From ", value=None)
        edu_current = st.checkbox("Currently studying", value=True)
        edu_to = st.date_input("To ", value=None)
        edu_desc = st.text_area("Description ")
        add_edu = st.form_submit_button("Add")
    if add_edu:
        dispatch(t.action(t.CLEAR_ERRORS))
        ok = api.add_education(http(), dispatch, {
            "school": school, "degree": degree, "fieldofstudy": field,
            "from": _iso(edu_from), "to": None if edu_current else _iso(edu_to),
            "current": edu_current, "description": edu_desc,
        })
        if ok:
            st.rerun()
        show_errors()

# -------------------- Danger zone --------------------

st.divider()
confirm = st.checkbox("I understand this cannot be undone")
if st.button("Delete my account", type="primary", disabled=not confirm):
    if api.delete_account(http(), dispatch, st.session_state):
        st.rerun()
    show_errors()
