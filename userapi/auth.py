# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import cast

from flask import Request, g, request

from userapi.domain.users.entities import TokenClaims
from userapi.domain.users.exceptions import InvalidTokenError, MissingTokenError
from userapi.domain.users.repositories import TokenService
from userapi.shared.logging import logger
from userapi.shared.middleware.pipeline import Guard


class AuthenticatedRequest(Request):
    user_id: str
    claims: TokenClaims


def authenticated_request() -> AuthenticatedRequest:
    """Return the current request cast to include authentication attributes."""
    return cast(AuthenticatedRequest, request)


def require_token(tokens: TokenService) -> Guard:
    """Build a guard that verifies the raw ``Authorization`` header value."""

    def authenticate() -> None:
        token = request.headers.get("Authorization", "")
        if not token:
            logger.warning(
                f"No Authorization header on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise MissingTokenError()

        try:
            claims = tokens.verify(token)
        except InvalidTokenError:
            logger.warning(f"Auth failed (invalid/expired token) on {request.method} {request.path}")
            raise

        req = authenticated_request()
        req.user_id = claims.user_id
        req.claims = claims
        g.user_id = claims.user_id
        logger.debug(f"Auth OK: user={claims.user_id} {request.method} {request.path}")

    return authenticate
