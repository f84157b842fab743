# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Registration payload validation.

Rules are checked in a fixed order and only the first violation is
reported, so the error message for a given payload is deterministic.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails, PydanticCustomError

from noteful.domain.users.exceptions import RegistrationValidationError
from noteful.shared.errors.validation_types import ValidationErrorType

MIN_USERNAME_LENGTH = 1
MIN_PASSWORD_LENGTH = 8
# bcrypt-family hashes only look at the first 72 bytes.
MAX_PASSWORD_LENGTH = 72

_RULE_ORDER: tuple[tuple[str, str], ...] = (
    (ValidationErrorType.MISSING, "username"),
    (ValidationErrorType.MISSING, "password"),
    (ValidationErrorType.STRING_TYPE, "username"),
    (ValidationErrorType.STRING_TYPE, "password"),
    (ValidationErrorType.WHITESPACE, "username"),
    (ValidationErrorType.WHITESPACE, "password"),
    (ValidationErrorType.TOO_SHORT, "username"),
    (ValidationErrorType.TOO_SHORT, "password"),
    (ValidationErrorType.TOO_LONG, "password"),
)

_BUILTIN_MESSAGES = {
    ValidationErrorType.MISSING: "Missing '{field}' in request body",
    ValidationErrorType.STRING_TYPE: "Field: '{field}' must be type String",
}


def _untrimmed(field: str) -> PydanticCustomError:
    return PydanticCustomError(
        ValidationErrorType.WHITESPACE,
        f"Field: '{field}' cannot start or end with whitespace",
        {},
    )


def _too_short(field: str, min_length: int) -> PydanticCustomError:
    return PydanticCustomError(
        ValidationErrorType.TOO_SHORT,
        f"Field: '{field}' must be at least {{min_length}} characters long",
        {"min_length": min_length},
    )


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(strict=True)

    username: str
    password: str
    fullname: str = ""

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if value.strip() != value:
            raise _untrimmed("username")
        if len(value) < MIN_USERNAME_LENGTH:
            raise _too_short("username", MIN_USERNAME_LENGTH)
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if value.strip() != value:
            raise _untrimmed("password")
        if len(value) < MIN_PASSWORD_LENGTH:
            raise _too_short("password", MIN_PASSWORD_LENGTH)
        if len(value) > MAX_PASSWORD_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.TOO_LONG,
                "Field: 'password' must be at most {max_length} characters long",
                {"max_length": MAX_PASSWORD_LENGTH},
            )
        return value

    @field_validator("fullname", mode="before")
    @classmethod
    def normalize_fullname(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()


class UserResponseDTO(BaseModel):
    id: str
    username: str
    fullname: str


def _error_field(error: ErrorDetails) -> str:
    loc = error.get("loc", ())
    return str(loc[0]) if loc else "unknown"


def _rank(error: ErrorDetails) -> int:
    key = (error["type"], _error_field(error))
    try:
        return _RULE_ORDER.index(key)
    except ValueError:
        return len(_RULE_ORDER)


def _to_registration_error(error: ErrorDetails) -> RegistrationValidationError:
    field = _error_field(error)
    template = _BUILTIN_MESSAGES.get(error["type"])
    message = template.format(field=field) if template else error["msg"]
    return RegistrationValidationError(message, location=field)


def validate_registration(payload: Any) -> RegisterRequestDTO:
    """Validate a registration body, raising the first violated rule."""
    if not isinstance(payload, Mapping):
        payload = {}
    try:
        return RegisterRequestDTO.model_validate(dict(payload))
    except PydanticValidationError as exc:
        first = min(exc.errors(include_url=False), key=_rank)
        raise _to_registration_error(first) from exc


__all__ = [
    "MAX_PASSWORD_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "RegisterRequestDTO",
    "UserResponseDTO",
    "validate_registration",
]
