# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userapi.domain.users.entities import User
from userapi.domain.users.exceptions import InvalidTokenError, SessionUserNotFoundError
from userapi.domain.users.repositories import UserRepository


class GetCurrentUserUseCase:
    """Resolve the user named by a verified token's ``user_id`` claim."""

    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, claimed_user_id: str) -> User:
        try:
            user_id = int(claimed_user_id)
        except ValueError as exc:
            raise InvalidTokenError() from exc

        user = self._users.find_by_id(user_id)
        if user is None:
            raise SessionUserNotFoundError()
        return user
