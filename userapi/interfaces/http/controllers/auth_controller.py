# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from userapi.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from userapi.application.use_cases.users.login_user import LoginUserUseCase
from userapi.auth import authenticated_request, require_token
from userapi.domain.users.exceptions import InvalidTokenError
from userapi.domain.users.repositories import TokenService
from userapi.interfaces.http.controllers.failures import failures_as
from userapi.interfaces.http.dto.auth import LoginRequestDTO, TokenDTO
from userapi.interfaces.http.dto.users import UserDTO
from userapi.shared.logging import logger
from userapi.shared.middleware.pipeline import guarded, require_body, validated_body


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
        tokens: TokenService,
    ) -> None:
        self._login_use_case = login_use_case
        self._current_user_use_case = current_user_use_case
        self._tokens = tokens

    def login(self) -> tuple[Response, int]:
        dto = validated_body(LoginRequestDTO)

        with failures_as("login_failed", "Error logging in"):
            token = self._login_use_case.execute(dto.email, dto.password)

        logger.info("auth.login: ok")
        return jsonify(TokenDTO(jwt=token).model_dump()), 200

    def me(self) -> tuple[Response, int]:
        req = authenticated_request()

        with failures_as("token_invalid", "Invalid or expired token", error_factory=InvalidTokenError):
            user = self._current_user_use_case.execute(req.user_id)

        return jsonify(UserDTO.from_entity(user).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        authenticate = require_token(self._tokens)
        credentials = require_body(
            LoginRequestDTO,
            code="credentials_required",
            message="Email and password are required",
        )

        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=guarded(credentials)(self.login), methods=["POST"])
        bp.add_url_rule("/login", view_func=guarded(authenticate)(self.me), methods=["GET"])
        return bp
