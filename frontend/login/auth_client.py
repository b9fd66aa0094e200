# login/auth_client.py
import logging
import time
import jwt
import requests
from typing import Any, Callable, Dict, MutableMapping, Optional

from store import types as t
from utils.http import call_api, error_payload, set_auth_token

logger = logging.getLogger(__name__)

TOKEN_KEY = "jwtToken"

Dispatch = Callable[[t.Action], Any]


def _norm_email(e: str) -> str:
    return (e or "").strip().lower()


def decode_token(token: str) -> Dict[str, Any]:
    """
    Reads the claims WITHOUT checking the signature. The result is only used
    to show who is signed in; the backend verifies the token on every call.
    """
    return jwt.decode(token, options={"verify_signature": False})


def set_current_user(decoded: Dict[str, Any]) -> t.Action:
    return t.action(t.SET_CURRENT_USER, decoded)


def register_user(http: requests.Session, dispatch: Dispatch, user_data: Dict[str, Any]) -> bool:
    """POST /api/auth/register. True on success (caller goes to login)."""
    payload = {**user_data, "email": _norm_email(user_data.get("email", ""))}
    try:
        call_api(http, "POST", "/api/auth/register", json=payload)
    except requests.RequestException as e:
        dispatch(t.action(t.GET_ERRORS, error_payload(e)))
        return False
    return True


def login_user(
    http: requests.Session,
    dispatch: Dispatch,
    storage: MutableMapping[str, Any],
    user_data: Dict[str, Any],
) -> bool:
    """POST /api/auth/login, keep the token and publish the decoded claims."""
    payload = {**user_data, "email": _norm_email(user_data.get("email", ""))}
    try:
        res = call_api(http, "POST", "/api/auth/login", json=payload)
    except requests.RequestException as e:
        dispatch(t.action(t.GET_ERRORS, error_payload(e)))
        return False

    token = res.json()["access_token"]
    storage[TOKEN_KEY] = token
    set_auth_token(http, token)
    dispatch(set_current_user(decode_token(token)))
    return True


def logout_user(http: requests.Session, dispatch: Dispatch, storage: MutableMapping[str, Any]) -> None:
    storage.pop(TOKEN_KEY, None)
    set_auth_token(http, None)
    # empty user -> is_authenticated False
    dispatch(set_current_user({}))
    dispatch(t.action(t.CLEAR_CURRENT_PROFILE))


def restore_session(
    http: requests.Session,
    dispatch: Dispatch,
    storage: MutableMapping[str, Any],
    now: Optional[float] = None,
) -> bool:
    """Re-applies a stored token on start-up; an expired one logs out."""
    token = storage.get(TOKEN_KEY)
    if not token:
        return False
    try:
        decoded = decode_token(token)
    except jwt.InvalidTokenError:
        logger.warning("Discarding unreadable stored token")
        logout_user(http, dispatch, storage)
        return False

    set_auth_token(http, token)
    dispatch(set_current_user(decoded))

    exp = decoded.get("exp")
    if exp is not None and exp < (now if now is not None else time.time()):
        logout_user(http, dispatch, storage)
        return False
    return True
