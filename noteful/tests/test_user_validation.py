from __future__ import annotations

from typing import Any

import pytest

from noteful.domain.users.exceptions import RegistrationValidationError
from noteful.interfaces.http.dto.users import validate_registration
from noteful.tests.support import FULLNAME, PASSWORD, USERNAME


def _violation(payload: Any) -> RegistrationValidationError:
    with pytest.raises(RegistrationValidationError) as excinfo:
        validate_registration(payload)
    return excinfo.value


@pytest.mark.parametrize(
    ("payload", "message", "location"),
    [
        ({"password": PASSWORD}, "Missing 'username' in request body", "username"),
        ({"username": USERNAME}, "Missing 'password' in request body", "password"),
        ({"username": 123, "password": PASSWORD}, "Field: 'username' must be type String", "username"),
        ({"username": USERNAME, "password": 123}, "Field: 'password' must be type String", "password"),
        ({"username": None, "password": PASSWORD}, "Field: 'username' must be type String", "username"),
        (
            {"username": " username ", "password": PASSWORD},
            "Field: 'username' cannot start or end with whitespace",
            "username",
        ),
        (
            {"username": USERNAME, "password": " password "},
            "Field: 'password' cannot start or end with whitespace",
            "password",
        ),
        (
            {"username": "", "password": PASSWORD},
            "Field: 'username' must be at least 1 characters long",
            "username",
        ),
        (
            {"username": USERNAME, "password": "p"},
            "Field: 'password' must be at least 8 characters long",
            "password",
        ),
        (
            {"username": USERNAME, "password": "p" * 73},
            "Field: 'password' must be at most 72 characters long",
            "password",
        ),
    ],
)
def test_single_rule_violations(payload: dict[str, Any], message: str, location: str) -> None:
    error = _violation({**payload, "fullname": FULLNAME})

    assert error.message == message
    assert error.location == location
    assert error.status == 422


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({}, "Missing 'username' in request body"),
        ({"username": 1}, "Missing 'password' in request body"),
        ({"username": 1, "password": 2}, "Field: 'username' must be type String"),
        ({"username": " a ", "password": 2}, "Field: 'password' must be type String"),
        ({"username": " a ", "password": " b "}, "Field: 'username' cannot start or end with whitespace"),
        ({"username": "", "password": " b "}, "Field: 'password' cannot start or end with whitespace"),
        ({"username": "", "password": "p"}, "Field: 'username' must be at least 1 characters long"),
    ],
)
def test_first_violated_rule_wins(payload: dict[str, Any], message: str) -> None:
    assert _violation(payload).message == message


@pytest.mark.parametrize("payload", [None, [], "username", 42])
def test_non_object_body_is_treated_as_empty(payload: Any) -> None:
    assert _violation(payload).message == "Missing 'username' in request body"


@pytest.mark.parametrize("length", [8, 72])
def test_password_length_bounds_are_inclusive(length: int) -> None:
    dto = validate_registration({"username": USERNAME, "password": "p" * length})

    assert len(dto.password) == length


def test_fullname_is_trimmed() -> None:
    dto = validate_registration(
        {"username": USERNAME, "password": PASSWORD, "fullname": " Example User "}
    )

    assert dto.fullname == FULLNAME


@pytest.mark.parametrize(("fullname", "expected"), [(None, ""), (42, "42")])
def test_fullname_is_not_type_checked(fullname: Any, expected: str) -> None:
    dto = validate_registration(
        {"username": USERNAME, "password": PASSWORD, "fullname": fullname}
    )

    assert dto.fullname == expected


def test_missing_fullname_defaults_to_empty() -> None:
    dto = validate_registration({"username": USERNAME, "password": PASSWORD})

    assert dto.fullname == ""


def test_error_body_has_message_and_location() -> None:
    error = _violation({"username": USERNAME})

    assert error.to_dict() == {
        "error": "validation_error",
        "message": "Missing 'password' in request body",
        "location": "password",
    }
