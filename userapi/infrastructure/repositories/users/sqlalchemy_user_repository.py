# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from userapi.domain.users.entities import User as DomainUser
from userapi.domain.users.repositories import UserRepository
from userapi.infrastructure.db.models import User
from userapi.infrastructure.db.session import SessionLocal, session_scope
from userapi.shared.errors import StoreError
from userapi.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session] = SessionLocal) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        try:
            with session_scope(self._session_factory) as session:
                yield session
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error(f"users.{operation}: database error")
            raise StoreError(operation) from exc

    def list_all(self) -> Sequence[DomainUser]:
        with self._session("list_all") as session:
            rows = session.scalars(select(User).order_by(User.id.asc())).all()
            return [_to_domain(row) for row in rows]

    def find_by_email(self, email: str) -> DomainUser | None:
        with self._session("find_by_email") as session:
            row = session.scalars(select(User).where(User.email == email).limit(1)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with self._session("find_by_id") as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def insert(self, name: str, email: str, password_hash: str) -> DomainUser:
        with self._session("insert") as session:
            row = User(name=name, email=email, password_hash=password_hash)
            session.add(row)
            session.flush()
            session.refresh(row)
            logger.info(f"users.insert: ok user_id={row.id}")
            return _to_domain(row)

    def update_by_id(
        self, user_id: int, name: str, email: str, password_hash: str
    ) -> DomainUser | None:
        with self._session("update_by_id") as session:
            row = session.get(User, user_id)
            if row is None:
                return None
            row.name = name
            row.email = email
            row.password_hash = password_hash
            session.flush()
            logger.info(f"users.update: ok user_id={user_id}")
            return _to_domain(row)

    def delete_by_id(self, user_id: int) -> DomainUser | None:
        with self._session("delete_by_id") as session:
            row = session.get(User, user_id)
            if row is None:
                return None
            deleted = _to_domain(row)
            session.delete(row)
            session.flush()
            logger.info(f"users.delete: ok user_id={user_id}")
            return deleted
