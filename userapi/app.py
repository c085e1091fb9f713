# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from userapi.infrastructure.container import Container, container
from userapi.infrastructure.db import init_db
from userapi.interfaces.http.controllers.misc_controller import MiscController
from userapi.shared.config import load_config
from userapi.shared.logging import logger, setup_logging
from userapi.shared.middleware.error_handler import configure_error_handling
from userapi.shared.middleware.request_logger import configure_request_logging


_config = load_config()


def create_app(services: Container | None = None) -> Flask:
    services = services or container

    setup_logging(debug_mode=_config.debug_logging)
    init_db()

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    CORS(app, resources={r"/*": {"origins": _config.security.allowed_origins}})

    app.register_blueprint(MiscController().as_blueprint())
    app.register_blueprint(services.auth_controller.as_blueprint())
    app.register_blueprint(services.users_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    logger.info("Flask app initialized")
    return app


def main() -> None:
    app = create_app()
    app.run(host=_config.host, port=_config.port, threaded=True)


if __name__ == "__main__":
    main()
