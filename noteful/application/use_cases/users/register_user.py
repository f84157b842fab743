# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from noteful.domain.users.entities import User, UserView
from noteful.domain.users.repositories import PasswordHasher, UserRepository
from noteful.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str, fullname: str = "") -> UserView:
        # Uniqueness is left to the store's unique index; a duplicate
        # surfaces from ``add`` as UserAlreadyExistsError.
        hashed = self._password_hasher.hash(password)
        user = User(id="", username=username, password_hash=hashed, fullname=fullname)
        persisted = self._users.add(user)
        logger.info(f"users.register: created user_id={persisted.id}")
        return persisted.view()
