# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import secrets
from datetime import UTC, datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.infrastructure.db.session import Base


def new_object_id() -> str:
    """24 hex characters, the same shape as a document-store object id."""
    return secrets.token_hex(12)


class User(Base):
    __tablename__ = "users"
    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    username: Mapped[str] = mapped_column(String(), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(256))
    fullname: Mapped[str] = mapped_column(Text, default="", server_default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )
