# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userapi.domain.users.entities import User
from userapi.domain.users.repositories import PasswordHasher, UserRepository


class CreateUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, name: str, email: str, password: str) -> User:
        hashed = self._password_hasher.hash(password)
        return self._users.insert(name, email, hashed)
