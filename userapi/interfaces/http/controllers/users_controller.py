# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from userapi.application.use_cases.users.create_user import CreateUserUseCase
from userapi.application.use_cases.users.delete_user import DeleteUserUseCase
from userapi.application.use_cases.users.list_users import ListUsersUseCase
from userapi.application.use_cases.users.update_user import UpdateUserUseCase
from userapi.auth import require_token
from userapi.domain.users.repositories import TokenService
from userapi.interfaces.http.controllers.failures import failures_as
from userapi.interfaces.http.dto.users import (CreateUserRequestDTO,
                                               UpdateUserRequestDTO, UserDTO)
from userapi.shared.logging import logger
from userapi.shared.middleware.pipeline import guarded, require_body, validated_body


class UsersController:
    def __init__(
        self,
        *,
        list_use_case: ListUsersUseCase,
        create_use_case: CreateUserUseCase,
        delete_use_case: DeleteUserUseCase,
        update_use_case: UpdateUserUseCase,
        tokens: TokenService,
    ) -> None:
        self._list_use_case = list_use_case
        self._create_use_case = create_use_case
        self._delete_use_case = delete_use_case
        self._update_use_case = update_use_case
        self._tokens = tokens

    def list_users(self) -> tuple[Response, int]:
        with failures_as("users_list_failed", "Error retrieving users"):
            users = self._list_use_case.execute()

        return jsonify([UserDTO.from_entity(u).model_dump() for u in users]), 200

    def create_user(self) -> tuple[Response, int]:
        dto = validated_body(CreateUserRequestDTO)

        with failures_as("user_create_failed", "Error creating user"):
            user = self._create_use_case.execute(dto.name, dto.email, dto.password)

        logger.info(f"users.create: ok user_id={user.id}")
        return jsonify(UserDTO.from_entity(user).model_dump()), HTTPStatus.CREATED

    def delete_user(self, user_id: int) -> tuple[Response, int]:
        with failures_as("user_delete_failed", "Error deleting user"):
            user = self._delete_use_case.execute(user_id)

        logger.info(f"users.delete: ok user_id={user_id}")
        return jsonify(UserDTO.from_entity(user).model_dump()), 200

    def update_user(self, user_id: int) -> tuple[Response, int]:
        dto = validated_body(UpdateUserRequestDTO)

        with failures_as("user_update_failed", "Error updating user"):
            user = self._update_use_case.execute(user_id, dto.name, dto.email, dto.password)

        logger.info(f"users.update: ok user_id={user_id}")
        return jsonify(UserDTO.from_entity(user).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        authenticate = require_token(self._tokens)
        new_user = require_body(CreateUserRequestDTO, message="name, email and password are required")
        # Existing clients expect 401 when an update omits a field.
        all_fields = require_body(
            UpdateUserRequestDTO,
            code="missing_fields",
            status=HTTPStatus.UNAUTHORIZED,
            message="Missing data",
        )

        bp = Blueprint("users", __name__)
        bp.add_url_rule("/users", view_func=guarded(authenticate)(self.list_users), methods=["GET"])
        bp.add_url_rule("/users", view_func=guarded(new_user)(self.create_user), methods=["POST"])
        bp.add_url_rule(
            "/users/<int:user_id>",
            view_func=guarded(authenticate)(self.delete_user),
            methods=["DELETE"],
        )
        bp.add_url_rule(
            "/users/<int:user_id>",
            view_func=guarded(authenticate, all_fields)(self.update_user),
            methods=["PUT"],
        )
        return bp
