"""Tests for the payload presence checks."""

from __future__ import annotations

import pytest

from validation.validators import (
    is_empty,
    validate_education_input,
    validate_experience_input,
    validate_login_input,
    validate_profile_input,
    validate_register_input,
)


@pytest.mark.parametrize("value", [None, "", "   ", [], {}])
def test_is_empty_true(value) -> None:
    assert is_empty(value)


@pytest.mark.parametrize("value", ["x", ["js"], {"a": 1}, 0, False])
def test_is_empty_false(value) -> None:
    assert not is_empty(value)


def test_profile_missing_status_and_skills_reports_both() -> None:
    errors, is_valid = validate_profile_input({"company": "Acme"})

    assert not is_valid
    assert errors == {
        "status": "Status field is required",
        "skills": "Skills field is required",
    }


def test_profile_blank_values_count_as_missing() -> None:
    errors, is_valid = validate_profile_input({"status": "  ", "skills": ""})

    assert not is_valid
    assert set(errors) == {"status", "skills"}


def test_profile_valid() -> None:
    errors, is_valid = validate_profile_input({"status": "Developer", "skills": "js,node"})

    assert is_valid
    assert errors == {}


def test_profile_validation_does_not_touch_payload() -> None:
    payload = {"status": " Developer ", "skills": "js, node"}
    validate_profile_input(payload)
    assert payload == {"status": " Developer ", "skills": "js, node"}


def test_experience_required_fields() -> None:
    errors, is_valid = validate_experience_input({"location": "Remote"})

    assert not is_valid
    assert errors == {
        "title": "Job title field is required",
        "company": "Company field is required",
        "from": "From date field is required",
    }


def test_experience_valid() -> None:
    _, is_valid = validate_experience_input(
        {"title": "Engineer", "company": "Acme", "from": "2020-01-01"})
    assert is_valid


def test_education_required_fields() -> None:
    errors, is_valid = validate_education_input({"school": "MIT"})

    assert not is_valid
    assert errors == {
        "degree": "Degree field is required",
        "fieldofstudy": "Field of study field is required",
        "from": "From date field is required",
    }


def test_validators_accept_none_payload() -> None:
    errors, is_valid = validate_education_input(None)
    assert not is_valid
    assert len(errors) == 4


def test_register_passwords_must_match() -> None:
    errors, is_valid = validate_register_input({
        "name": "Ada", "email": "ada@example.com",
        "password": "secret123", "password2": "secret124",
    })
    assert not is_valid
    assert errors == {"password2": "Passwords must match"}


def test_login_requires_email_and_password() -> None:
    errors, is_valid = validate_login_input({})
    assert not is_valid
    assert set(errors) == {"email", "password"}


@pytest.mark.parametrize("skills", [" , ,", ",", ["", " "]])
def test_profile_skills_without_items(skills) -> None:
    errors, is_valid = validate_profile_input({"status": "Developer", "skills": skills})

    assert not is_valid
    assert errors == {"skills": "Skills field is required"}
