# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-bounded claims tokens (JWT)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from noteful.domain.users.entities import UserView

DEFAULT_TOKEN_TTL = timedelta(days=7)

# Claim keys that must never be embedded in the user view.
_SECRET_USER_FIELDS = frozenset({"password", "password_hash"})


class TokenVerificationError(Exception):
    reason = "invalid"


class InvalidTokenError(TokenVerificationError):
    """Wrong key, disallowed algorithm, malformed structure or missing claims."""

    reason = "invalid"


class TokenExpiredError(TokenVerificationError):
    reason = "expired"


@dataclass(slots=True, frozen=True)
class TokenClaims:
    user: dict[str, Any]
    subject: str
    issued_at: datetime | None
    expires_at: datetime


def _sanitize_user(user: UserView | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(user, UserView):
        return user.to_dict()
    return {key: value for key, value in user.items() if key not in _SECRET_USER_FIELDS}


class JwtTokenService:
    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        leeway: timedelta = timedelta(0),
    ) -> None:
        if not secret:
            raise ValueError("JWT signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._leeway = leeway

    def issue(
        self,
        user: UserView | Mapping[str, Any],
        subject: str,
        ttl: timedelta | None = None,
        *,
        not_before_expiry: datetime | None = None,
    ) -> str:
        """Sign ``{user, sub, iat, exp}``.

        ``exp`` is ``now + ttl`` unless ``not_before_expiry`` is later, in
        which case that expiry is kept.
        """
        now = datetime.now(UTC)
        expires_at = now + (ttl if ttl is not None else self._ttl)
        if not_before_expiry is not None and not_before_expiry > expires_at:
            expires_at = not_before_expiry
        payload = {
            "user": _sanitize_user(user),
            "sub": subject,
            "iat": now,
            "exp": expires_at,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                leeway=self._leeway,
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError("token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(str(exc)) from exc

        user = payload.get("user")
        if not isinstance(user, dict):
            raise InvalidTokenError("token carries no user claim")

        issued_at = payload.get("iat")
        return TokenClaims(
            user=user,
            subject=payload["sub"],
            issued_at=datetime.fromtimestamp(issued_at, UTC) if issued_at is not None else None,
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )

    def refresh(self, token: str) -> str:
        claims = self.verify(token)
        return self.issue(
            claims.user,
            claims.subject,
            not_before_expiry=claims.expires_at,
        )


__all__ = [
    "DEFAULT_TOKEN_TTL",
    "InvalidTokenError",
    "JwtTokenService",
    "TokenClaims",
    "TokenExpiredError",
    "TokenVerificationError",
]
