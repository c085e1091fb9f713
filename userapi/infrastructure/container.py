# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from userapi.application.services.password_hashing import BcryptPasswordHasher
from userapi.application.services.tokens import JwtTokenService, TokenSettings
from userapi.application.use_cases.users.create_user import CreateUserUseCase
from userapi.application.use_cases.users.delete_user import DeleteUserUseCase
from userapi.application.use_cases.users.get_current_user import \
    GetCurrentUserUseCase
from userapi.application.use_cases.users.list_users import ListUsersUseCase
from userapi.application.use_cases.users.login_user import LoginUserUseCase
from userapi.application.use_cases.users.update_user import UpdateUserUseCase
from userapi.infrastructure.db import SessionLocal
from userapi.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from userapi.interfaces.http.controllers.auth_controller import AuthController
from userapi.interfaces.http.controllers.users_controller import UsersController
from userapi.shared.config import load_config


class Container:
    def __init__(self) -> None:
        pass

    @cached_property
    def token_settings(self) -> TokenSettings:
        return TokenSettings.from_config(load_config())

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(self.token_settings)

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.user_repository)

    @cached_property
    def create_user_use_case(self) -> CreateUserUseCase:
        return CreateUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.user_repository)

    @cached_property
    def delete_user_use_case(self) -> DeleteUserUseCase:
        return DeleteUserUseCase(users=self.user_repository)

    @cached_property
    def update_user_use_case(self) -> UpdateUserUseCase:
        return UpdateUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            current_user_use_case=self.current_user_use_case,
            tokens=self.token_service,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            list_use_case=self.list_users_use_case,
            create_use_case=self.create_user_use_case,
            delete_use_case=self.delete_user_use_case,
            update_use_case=self.update_user_use_case,
            tokens=self.token_service,
        )


container = Container()
