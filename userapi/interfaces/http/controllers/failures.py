# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from userapi.shared.errors import AppError, InternalError, StoreError
from userapi.shared.logging import logger


@contextmanager
def failures_as(
    code: str,
    message: str,
    *,
    error_factory: Callable[[], AppError] | None = None,
) -> Iterator[None]:
    """Re-raise store and unexpected errors as one handler-level error.

    Other ``AppError``s (not found, bad credentials, ...) pass through.
    """
    try:
        yield
    except StoreError as exc:
        raise (error_factory() if error_factory else InternalError(code, message=message)) from exc
    except AppError:
        raise
    except Exception as exc:
        logger.opt(exception=exc).error(f"{code}: unexpected {type(exc).__name__}")
        raise (error_factory() if error_factory else InternalError(code, message=message)) from exc


__all__ = ["failures_as"]
