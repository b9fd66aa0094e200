# validation/validators.py
"""
Presence checks for incoming payloads.

Every validator takes the raw body mapping and returns ``(errors, is_valid)``
where ``errors`` maps field name -> message. Values are never coerced or
modified here; typed parsing happens afterwards in the pydantic schemas.
"""
from typing import Any, Dict, Iterable, Mapping, Tuple

Errors = Dict[str, str]

PROFILE_REQUIRED = (
    ("status", "Status field is required"),
    ("skills", "Skills field is required"),
)

EXPERIENCE_REQUIRED = (
    ("title", "Job title field is required"),
    ("company", "Company field is required"),
    ("from", "From date field is required"),
)

EDUCATION_REQUIRED = (
    ("school", "School field is required"),
    ("degree", "Degree field is required"),
    ("fieldofstudy", "Field of study field is required"),
    ("from", "From date field is required"),
)

REGISTER_REQUIRED = (
    ("name", "Name field is required"),
    ("email", "Email field is required"),
    ("password", "Password field is required"),
    ("password2", "Confirm password field is required"),
)

LOGIN_REQUIRED = (
    ("email", "Email field is required"),
    ("password", "Password field is required"),
)


def is_empty(value: Any) -> bool:
    """None, blank strings and empty collections all count as empty."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def _require(data: Mapping[str, Any], required: Iterable[Tuple[str, str]]) -> Errors:
    data = data or {}
    return {field: msg for field, msg in required if is_empty(data.get(field))}


def _no_skill_items(value: Any) -> bool:
    """A skills value whose comma-separated / listed items are all blank."""
    if isinstance(value, str):
        return not any(part.strip() for part in value.split(","))
    if isinstance(value, (list, tuple)):
        return all(is_empty(item) for item in value)
    return False


def validate_profile_input(data: Mapping[str, Any]) -> Tuple[Errors, bool]:
    errors = _require(data, PROFILE_REQUIRED)
    if "skills" not in errors and _no_skill_items((data or {}).get("skills")):
        errors["skills"] = "Skills field is required"
    return errors, not errors


def validate_experience_input(data: Mapping[str, Any]) -> Tuple[Errors, bool]:
    errors = _require(data, EXPERIENCE_REQUIRED)
    return errors, not errors


def validate_education_input(data: Mapping[str, Any]) -> Tuple[Errors, bool]:
    errors = _require(data, EDUCATION_REQUIRED)
    return errors, not errors


def validate_register_input(data: Mapping[str, Any]) -> Tuple[Errors, bool]:
    errors = _require(data, REGISTER_REQUIRED)
    if "password" not in errors and "password2" not in errors:
        if data["password"] != data["password2"]:
            errors["password2"] = "Passwords must match"
    return errors, not errors


def validate_login_input(data: Mapping[str, Any]) -> Tuple[Errors, bool]:
    errors = _require(data, LOGIN_REQUIRED)
    return errors, not errors
