# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class UserView:
    """Public projection of a user; carries no password material."""

    id: str
    username: str
    fullname: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username, "fullname": self.fullname}


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str
    password_hash: str
    fullname: str = ""

    def view(self) -> UserView:
        return UserView(id=self.id, username=self.username, fullname=self.fullname)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r})"
