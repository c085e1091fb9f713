# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from userapi.infrastructure.db.session import Base


class User(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column("id_users", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column("password", String(256))
