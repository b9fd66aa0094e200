# utils/http.py
import os
import requests
import streamlit as st
from typing import Any, Dict, Optional

API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))


def _secret(name: str) -> Optional[str]:
    try:
        return st.secrets.get(name)
    except FileNotFoundError:
        # no secrets.toml outside a deployed app
        return None


def get_api_base() -> str:
    # secrets > env > fallback
    return (
        _secret("API_BASE")
        or os.getenv("API_BASE")
        or "http://127.0.0.1:8000"
    ).rstrip("/")


def new_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({"Accept": "application/json"})
    return s


def set_auth_token(session: requests.Session, token: Optional[str]) -> None:
    """Attach the bearer token to every later request, or drop it."""
    if token:
        session.headers["Authorization"] = f"Bearer {token}"
    else:
        session.headers.pop("Authorization", None)


def call_api(session: requests.Session, method: str, path: str, **kwargs) -> requests.Response:
    kwargs.setdefault("timeout", API_TIMEOUT)
    res = session.request(method, f"{get_api_base()}{path}", **kwargs)
    res.raise_for_status()
    return res


def error_payload(exc: requests.RequestException) -> Dict[str, Any]:
    """Raw response body when there is one, otherwise the exception text."""
    res = getattr(exc, "response", None)
    if res is None:
        return {"message": str(exc)}
    try:
        body = res.json()
    except ValueError:
        return {"message": res.text or f"HTTP {res.status_code}"}
    # FastAPI wraps error bodies in "detail"
    if isinstance(body, dict) and "detail" in body:
        detail = body["detail"]
        return detail if isinstance(detail, dict) else {"message": detail}
    return body if isinstance(body, dict) else {"message": body}
