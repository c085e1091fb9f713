# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import BcryptPasswordHasher
from .services.tokens import JwtTokenService, TokenSettings
from .use_cases.users.create_user import CreateUserUseCase
from .use_cases.users.delete_user import DeleteUserUseCase
from .use_cases.users.get_current_user import GetCurrentUserUseCase
from .use_cases.users.list_users import ListUsersUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.update_user import UpdateUserUseCase

__all__ = [
    "BcryptPasswordHasher",
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetCurrentUserUseCase",
    "JwtTokenService",
    "ListUsersUseCase",
    "LoginUserUseCase",
    "TokenSettings",
    "UpdateUserUseCase",
]
