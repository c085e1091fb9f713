# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userapi.shared.errors.base import AuthError, InternalError, NotFoundError


class MissingTokenError(AuthError):
    def __init__(self) -> None:
        super().__init__("token_missing", message="Token not provided")


class InvalidTokenError(AuthError):
    def __init__(self) -> None:
        super().__init__("token_invalid", message="Invalid or expired token")


class TokenConfigurationError(InternalError):
    def __init__(self) -> None:
        super().__init__("token_secret_missing", message="Token signing is not configured")


class UnknownEmailError(AuthError):
    def __init__(self) -> None:
        super().__init__("invalid_email", message="Invalid email")


class WrongPasswordError(AuthError):
    def __init__(self) -> None:
        super().__init__("invalid_password", message="Invalid password")


class SessionUserNotFoundError(AuthError):
    def __init__(self) -> None:
        super().__init__("user_not_found", message="User not found")


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: int) -> None:
        super().__init__(
            "user_not_found",
            context={"user_id": user_id},
            message="User not found",
        )
