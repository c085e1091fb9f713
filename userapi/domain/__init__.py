# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import TokenClaims, User
from .users.repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "PasswordHasher",
    "TokenClaims",
    "TokenService",
    "User",
    "UserRepository",
]
