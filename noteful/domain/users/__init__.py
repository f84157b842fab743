# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import User, UserView
from .exceptions import (
    InvalidCredentialsError,
    MissingCredentialsError,
    RegistrationValidationError,
    UnauthenticatedError,
    UserAlreadyExistsError,
)

__all__ = [
    "InvalidCredentialsError",
    "MissingCredentialsError",
    "RegistrationValidationError",
    "UnauthenticatedError",
    "User",
    "UserAlreadyExistsError",
    "UserView",
]
