# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
            }
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def raise_validation_error(
    exc: PydanticValidationError,
    *,
    code: str = "validation_error",
    status: HTTPStatus = HTTPStatus.BAD_REQUEST,
    message: str | None = None,
) -> NoReturn:
    context = format_pydantic_errors(exc)
    raise ValidationError(code, status=status, context=context, message=message) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
