# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Engine

from userapi.infrastructure.db import ENGINE


def check_database(engine: Engine = ENGINE) -> bool:
    """Run a trivial statement; raises the driver error if the store is unreachable."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    return True


__all__ = ["check_database"]
