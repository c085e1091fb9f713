# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens (JWT, HS256).

Tokens carry a single identity claim, ``user_id``, plus ``iat``/``exp``.
The signing secret lives in an immutable :class:`TokenSettings` built once
at startup; a missing secret makes issuing fail with an internal error and
verification reject every token.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from jose import JWTError, jwt

from userapi.domain.users.entities import TokenClaims
from userapi.domain.users.exceptions import InvalidTokenError, TokenConfigurationError
from userapi.domain.users.repositories import TokenService
from userapi.shared.config import AppConfig
from userapi.shared.logging import logger

ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(hours=7)

_DECODE_OPTIONS = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_iat": False,
    "verify_nbf": False,
    "require_iat": True,
    "require_exp": True,
}


@dataclass(slots=True, frozen=True)
class TokenSettings:
    secret: str | None
    lifetime: timedelta = TOKEN_LIFETIME
    algorithm: str = ALGORITHM

    @classmethod
    def from_config(cls, config: AppConfig) -> TokenSettings:
        if not config.secret:
            logger.warning("tokens: `secret` is not set, token operations will fail closed")
        return cls(secret=config.secret)


class JwtTokenService(TokenService):
    def __init__(
        self,
        settings: TokenSettings,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._settings = settings
        self._clock = clock

    def issue(self, user_id: int | str) -> str:
        if not self._settings.secret:
            raise TokenConfigurationError()

        issued_at = int(self._clock())
        claims: dict[str, Any] = {
            "user_id": str(user_id),
            "iat": issued_at,
            "exp": issued_at + int(self._settings.lifetime.total_seconds()),
        }
        return jwt.encode(
            claims,
            self._settings.secret,
            algorithm=self._settings.algorithm,
            headers={"typ": "JWT"},
        )

    def verify(self, token: str) -> TokenClaims:
        if not self._settings.secret:
            logger.warning("tokens.verify: rejected, signing secret is not configured")
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self._settings.secret,
                algorithms=[self._settings.algorithm],
                options=_DECODE_OPTIONS,
            )
        except JWTError as exc:
            logger.warning(f"tokens.verify: rejected ({type(exc).__name__}: {exc})")
            raise InvalidTokenError() from exc

        user_id = payload.get("user_id")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(user_id, str) or not user_id:
            logger.warning("tokens.verify: rejected, user_id claim missing")
            raise InvalidTokenError()
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            logger.warning("tokens.verify: rejected, iat/exp are not integers")
            raise InvalidTokenError()

        now = self._clock()
        if not issued_at <= now <= expires_at:
            logger.warning(
                f"tokens.verify: rejected, now={int(now)} outside [{issued_at}, {expires_at}]"
            )
            raise InvalidTokenError()

        return TokenClaims(user_id=user_id, issued_at=issued_at, expires_at=expires_at)


__all__ = ["ALGORITHM", "TOKEN_LIFETIME", "JwtTokenService", "TokenSettings"]
