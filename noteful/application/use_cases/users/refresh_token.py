# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from noteful.application.services.tokens import JwtTokenService, TokenVerificationError
from noteful.domain.users.exceptions import UnauthenticatedError
from noteful.shared.logging import logger


class RefreshTokenUseCase:
    """Reissue a still-valid token with the same subject and user claim."""

    def __init__(self, *, tokens: JwtTokenService) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> str:
        if not token:
            logger.warning("auth.refresh: no bearer token")
            raise UnauthenticatedError()

        try:
            refreshed = self._tokens.refresh(token)
        except TokenVerificationError as exc:
            logger.warning(f"auth.refresh: rejected token ({exc.reason}): {exc}")
            raise UnauthenticatedError() from exc

        logger.info("auth.refresh: ok")
        return refreshed
