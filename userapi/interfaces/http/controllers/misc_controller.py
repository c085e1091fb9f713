# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from sqlalchemy.exc import SQLAlchemyError

from userapi.infrastructure.health import check_database
from userapi.shared.logging import logger


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self) -> tuple[Response, int]:
        status: dict[str, object] = {"ok": True}
        try:
            check_database()
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("health: database check failed")
            status["ok"] = False
            status["database"] = "error"
        return jsonify(status), 200 if status["ok"] else 503
