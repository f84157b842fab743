# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from noteful.application.services.tokens import JwtTokenService
from noteful.domain.users.exceptions import InvalidCredentialsError
from noteful.domain.users.repositories import PasswordHasher, UserRepository
from noteful.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: JwtTokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        # Checked against when the username is unknown so both paths pay for a hash.
        self._dummy_hash = password_hasher.hash(secrets.token_urlsafe(16))

    def execute(self, username: str, password: str) -> str:
        user = self._users.find_by_username(username)
        digest = user.password_hash if user is not None else self._dummy_hash
        password_valid = self._password_hasher.verify(password, digest)

        if user is None or not password_valid:
            # Unknown user and wrong password are reported identically.
            logger.warning(f"auth.login: invalid credentials username={username!r}")
            raise InvalidCredentialsError()

        logger.info(f"auth.login: ok user_id={user.id}")
        return self._tokens.issue(user.view(), subject=user.username)
