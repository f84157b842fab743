# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from noteful.domain.users.entities import User as DomainUser
from noteful.domain.users.exceptions import UserAlreadyExistsError
from noteful.domain.users.repositories import UserRepository
from noteful.infrastructure.db.models import User, new_object_id
from noteful.infrastructure.db.session import session_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        fullname=row.fullname or "",
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        row = User(
            id=user.id or new_object_id(),
            username=user.username,
            password_hash=user.password_hash,
            fullname=user.fullname,
        )
        try:
            with session_scope(self._session_factory) as session:
                session.add(row)
                session.flush()
        except IntegrityError as exc:
            # The unique index on username is the source of truth for duplicates.
            raise UserAlreadyExistsError() from exc
        return _to_domain(row)
