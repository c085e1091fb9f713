# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time

from flask import Flask, Response, g, request

from userapi.shared.config import load_config
from userapi.shared.logging import (clear_correlation_id, get_correlation_id,
                                    logger, set_correlation_id)

REQUEST_ID_HEADER = "X-Request-ID"

# Bearer tokens travel in the raw Authorization header.
_SECRET_HEADERS = frozenset({"authorization", "cookie", "proxy-authorization"})


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _loggable_headers() -> dict[str, str]:
    return {
        key: _fingerprint(value) if key.lower() in _SECRET_HEADERS else value
        for key, value in request.headers.items()
    }


def configure_request_logging(app: Flask) -> None:
    """Assign a request id and write one access line per request."""
    verbose = load_config().debug_logging

    @app.before_request
    def _open_request() -> None:
        set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or secrets.token_urlsafe(8))
        g.request_started = time.perf_counter()
        if verbose:
            logger.debug(
                f"--> {request.method} {request.path} from {_client_ip()} "
                f"headers={_loggable_headers()} body_size={request.content_length or 0}"
            )

    @app.after_request
    def _close_request(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000.0
        line = (
            f"{request.method} {request.path} -> {response.status_code} "
            f"in {elapsed_ms:.1f} ms from {_client_ip()}"
        )
        user_id = g.get("user_id")
        if user_id is not None:
            line += f" user={user_id}"
        logger.info(line)
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        return response

    @app.teardown_request
    def _end_request(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"{request.method} {request.path} aborted: {type(exc).__name__}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
