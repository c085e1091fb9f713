# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.message:
            payload["message"] = self.message
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, context=context, message=message)


class StoreError(InfrastructureError):
    def __init__(
        self,
        operation: str,
        *,
        message: str | None = "Database error",
    ) -> None:
        super().__init__("store_error", context={"operation": operation}, message=message)


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        status: HTTPStatus = HTTPStatus.BAD_REQUEST,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(code=code, status=status, context=context, message=message)


class AuthError(AppError):
    def __init__(
        self,
        code: str = "unauthorized",
        *,
        message: str | None = "Unauthorized",
    ) -> None:
        super().__init__(code=code, status=HTTPStatus.UNAUTHORIZED, message=message)


class NotFoundError(AppError):
    def __init__(
        self,
        code: str = "not_found",
        *,
        context: Mapping[str, Any] | None = None,
        message: str | None = "Not found",
    ) -> None:
        super().__init__(code=code, status=HTTPStatus.NOT_FOUND, context=context, message=message)


class InternalError(AppError):
    def __init__(
        self,
        code: str = "internal_error",
        *,
        message: str | None = "Internal server error",
    ) -> None:
        super().__init__(code=code, status=HTTPStatus.INTERNAL_SERVER_ERROR, message=message)
