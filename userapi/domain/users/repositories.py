# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import TokenClaims, User


class UserRepository(Protocol):
    def list_all(self) -> Sequence[User]: ...
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def insert(self, name: str, email: str, password_hash: str) -> User: ...
    def update_by_id(
        self, user_id: int, name: str, email: str, password_hash: str
    ) -> User | None: ...
    def delete_by_id(self, user_id: int) -> User | None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, user_id: int | str) -> str: ...
    def verify(self, token: str) -> TokenClaims: ...
