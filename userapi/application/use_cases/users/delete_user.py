# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userapi.domain.users.entities import User
from userapi.domain.users.exceptions import UserNotFoundError
from userapi.domain.users.repositories import UserRepository


class DeleteUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User:
        deleted = self._users.delete_by_id(user_id)
        if deleted is None:
            raise UserNotFoundError(user_id)
        return deleted
