# store/types.py
from typing import Any, Dict

GET_ERRORS = "GET_ERRORS"
CLEAR_ERRORS = "CLEAR_ERRORS"
SET_CURRENT_USER = "SET_CURRENT_USER"
GET_PROFILE = "GET_PROFILE"
GET_PROFILES = "GET_PROFILES"
PROFILE_LOADING = "PROFILE_LOADING"
PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
CLEAR_CURRENT_PROFILE = "CLEAR_CURRENT_PROFILE"

Action = Dict[str, Any]


def action(type_: str, payload: Any = None) -> Action:
    return {"type": type_, "payload": payload}
