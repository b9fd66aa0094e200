# utils/api_profile.py
"""
Profile actions. Each one makes a single call to /api/profile* and then
dispatches one success update or one error update.
"""
import requests
from typing import Any, Callable, Dict, MutableMapping

from login.auth_client import TOKEN_KEY, set_current_user
from store import types as t
from utils.http import call_api, error_payload, set_auth_token

Dispatch = Callable[[t.Action], Any]


def _mutate(http: requests.Session, dispatch: Dispatch, method: str, path: str, **kwargs) -> bool:
    try:
        res = call_api(http, method, path, **kwargs)
    except requests.RequestException as e:
        dispatch(t.action(t.GET_ERRORS, error_payload(e)))
        return False
    dispatch(t.action(t.GET_PROFILE, res.json()))
    return True


def _is_not_found(exc: requests.RequestException) -> bool:
    res = getattr(exc, "response", None)
    return res is not None and res.status_code == 404


def _fetch(http: requests.Session, dispatch: Dispatch, path: str, ok_type: str, not_found: t.Action) -> None:
    """GET with loading state; a 404 is an empty result, anything else an error."""
    dispatch(t.action(t.PROFILE_LOADING))
    try:
        res = call_api(http, "GET", path)
    except requests.RequestException as e:
        if _is_not_found(e):
            dispatch(not_found)
        else:
            dispatch(t.action(t.GET_ERRORS, error_payload(e)))
        return
    dispatch(t.action(ok_type, res.json()))


def get_current_profile(http: requests.Session, dispatch: Dispatch) -> None:
    # no profile yet: the dashboard offers to create one
    _fetch(http, dispatch, "/api/profile", t.GET_PROFILE, t.action(t.GET_PROFILE, {}))


def get_profiles(http: requests.Session, dispatch: Dispatch) -> None:
    _fetch(http, dispatch, "/api/profile/all", t.GET_PROFILES, t.action(t.GET_PROFILES, []))


def get_profile_by_handle(http: requests.Session, dispatch: Dispatch, handle: str) -> None:
    _fetch(http, dispatch, f"/api/profile/handle/{handle}", t.GET_PROFILE,
           t.action(t.PROFILE_NOT_FOUND))


def create_profile(http: requests.Session, dispatch: Dispatch, form_data: Dict[str, Any]) -> bool:
    return _mutate(http, dispatch, "POST", "/api/profile", json=form_data)


def add_experience(http: requests.Session, dispatch: Dispatch, exp_data: Dict[str, Any]) -> bool:
    return _mutate(http, dispatch, "POST", "/api/profile/experience", json=exp_data)


def add_education(http: requests.Session, dispatch: Dispatch, edu_data: Dict[str, Any]) -> bool:
    return _mutate(http, dispatch, "POST", "/api/profile/education", json=edu_data)


def delete_experience(http: requests.Session, dispatch: Dispatch, exp_id: str) -> bool:
    return _mutate(http, dispatch, "DELETE", f"/api/profile/experience/{exp_id}")


def delete_education(http: requests.Session, dispatch: Dispatch, edu_id: str) -> bool:
    return _mutate(http, dispatch, "DELETE", f"/api/profile/education/{edu_id}")


def delete_account(http: requests.Session, dispatch: Dispatch, storage: MutableMapping[str, Any]) -> bool:
    """DELETE /api/profile removes profile and user; the session goes with them."""
    try:
        call_api(http, "DELETE", "/api/profile")
    except requests.RequestException as e:
        dispatch(t.action(t.GET_ERRORS, error_payload(e)))
        return False
    storage.pop(TOKEN_KEY, None)
    set_auth_token(http, None)
    dispatch(set_current_user({}))
    return True
