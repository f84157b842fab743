# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from noteful.shared.errors.base import DomainError, ValidationError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.BAD_REQUEST
    message = "The username already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Unauthorized"


class UnauthenticatedError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED
    message = "Unauthorized"


class MissingCredentialsError(DomainError):
    code = "bad_request"
    status = HTTPStatus.BAD_REQUEST
    message = "Missing credentials"


class RegistrationValidationError(ValidationError):
    def __init__(self, message: str, *, location: str) -> None:
        super().__init__(message=message, context={"location": location})
        self.location = location

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message, "location": self.location}
