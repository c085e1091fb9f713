# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userapi.domain.users.entities import User
from userapi.domain.users.exceptions import UserNotFoundError
from userapi.domain.users.repositories import PasswordHasher, UserRepository


class UpdateUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, user_id: int, name: str, email: str, password: str) -> User:
        hashed = self._password_hasher.hash(password)
        updated = self._users.update_by_id(user_id, name, email, hashed)
        if updated is None:
            raise UserNotFoundError(user_id)
        return updated
