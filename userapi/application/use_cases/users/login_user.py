# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userapi.domain.users.exceptions import UnknownEmailError, WrongPasswordError
from userapi.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from userapi.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> str:
        user = self._users.find_by_email(email)
        if user is None:
            logger.info("auth.login: unknown email")
            raise UnknownEmailError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: wrong password user_id={user.id}")
            raise WrongPasswordError()

        return self._tokens.issue(user.id)
