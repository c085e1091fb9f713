# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from userapi.shared.config import load_config
from userapi.shared.logging import logger

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def register_error_handler(
    app: Flask, *, default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
) -> None:
    debug_mode = load_config().debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.opt(exception=exc).error(
                f"{exc.code} on {request.method} {request.path}: {exc.__cause__!r}"
            )
        else:
            logger.warning(
                f"Handled application error {exc.code} ({int(exc.status)}) "
                f"on {request.method} {request.path}"
            )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {_client_ip()}, user={user_id}, "
                f"query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.opt(exception=exc).error(
                f"Error: {type(exc).__name__} on {request.method} {request.path}"
            )

        response = jsonify({"error": "internal_error", "message": "Internal server error"})
        return response, default_status
