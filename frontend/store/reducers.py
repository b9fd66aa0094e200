# store/reducers.py
"""
Pure state transitions. Each reducer takes the previous slice and an action
and returns a new slice; unknown actions return the slice unchanged.
"""
from typing import Any, Dict
from store import types as t
from store.state import AppState, AuthState, ProfileState


def auth_reducer(state: AuthState, action: t.Action) -> AuthState:
    if action["type"] == t.SET_CURRENT_USER:
        user = dict(action.get("payload") or {})
        return AuthState(is_authenticated=bool(user), user=user)
    return state


def profile_reducer(state: ProfileState, action: t.Action) -> ProfileState:
    kind = action["type"]
    payload = action.get("payload")
    if kind == t.PROFILE_LOADING:
        return state.model_copy(update={"loading": True})
    if kind == t.GET_PROFILE:
        return state.model_copy(update={"profile": payload, "loading": False})
    if kind == t.GET_PROFILES:
        return state.model_copy(update={"profiles": list(payload or []), "loading": False})
    if kind == t.GET_ERRORS:
        return state.model_copy(update={"loading": False})
    if kind == t.PROFILE_NOT_FOUND:
        return state.model_copy(update={"profile": None, "loading": False})
    if kind == t.CLEAR_CURRENT_PROFILE:
        return state.model_copy(update={"profile": None})
    if kind == t.SET_CURRENT_USER and not payload:
        # signing out drops the cached profile
        return ProfileState()
    return state


def errors_reducer(state: Dict[str, Any], action: t.Action) -> Dict[str, Any]:
    if action["type"] == t.GET_ERRORS:
        payload = action.get("payload")
        return dict(payload) if isinstance(payload, dict) else {"message": payload}
    if action["type"] == t.CLEAR_ERRORS:
        return {}
    return state


def root_reducer(state: AppState, action: t.Action) -> AppState:
    return AppState(
        auth=auth_reducer(state.auth, action),
        profile=profile_reducer(state.profile, action),
        errors=errors_reducer(state.errors, action),
    )
