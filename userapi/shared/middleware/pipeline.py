# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Ordered guard pipeline for Flask views.

A guard is a zero-argument callable that runs before the view. It either
returns (the next guard runs) or raises an ``AppError``, which stops the
pipeline and is rendered by the application's error handler.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any, TypeVar, cast

from flask import g, request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from userapi.shared.errors.validation import raise_validation_error

F = TypeVar("F", bound=Callable[..., Any])
M = TypeVar("M", bound=BaseModel)

Guard = Callable[[], None]


def guarded(*guards: Guard) -> Callable[[F], F]:
    def decorator(view: F) -> F:
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            for guard in guards:
                guard()
            return view(*args, **kwargs)

        return cast(F, wrapper)

    return decorator


def require_body(
    model: type[BaseModel],
    *,
    code: str = "validation_error",
    status: HTTPStatus = HTTPStatus.BAD_REQUEST,
    message: str | None = None,
) -> Guard:
    """Build a guard that validates the JSON body into ``model`` and stores it on ``g``."""

    def validate() -> None:
        try:
            g.body = model.model_validate(request.get_json(silent=True) or {})
        except PydanticValidationError as exc:
            raise_validation_error(exc, code=code, status=status, message=message)

    return validate


def validated_body(model: type[M]) -> M:
    body = getattr(g, "body", None)
    if not isinstance(body, model):
        raise RuntimeError(f"{model.__name__} body requested but no require_body guard ran")
    return body


__all__ = ["Guard", "guarded", "require_body", "validated_body"]
