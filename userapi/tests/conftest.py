from __future__ import annotations

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="userapi-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'users.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["APP_ENV"] = "test"
os.environ["secret"] = "test-signing-secret"

from collections.abc import Sequence  # noqa: E402

import pytest  # noqa: E402
from flask import Flask  # noqa: E402

from userapi.application.services.tokens import JwtTokenService, TokenSettings  # noqa: E402
from userapi.application.use_cases.users.create_user import CreateUserUseCase  # noqa: E402
from userapi.application.use_cases.users.delete_user import DeleteUserUseCase  # noqa: E402
from userapi.application.use_cases.users.get_current_user import GetCurrentUserUseCase  # noqa: E402
from userapi.application.use_cases.users.list_users import ListUsersUseCase  # noqa: E402
from userapi.application.use_cases.users.login_user import LoginUserUseCase  # noqa: E402
from userapi.application.use_cases.users.update_user import UpdateUserUseCase  # noqa: E402
from userapi.domain.users.entities import User  # noqa: E402
from userapi.domain.users.repositories import PasswordHasher, UserRepository  # noqa: E402
from userapi.interfaces.http.controllers.auth_controller import AuthController  # noqa: E402
from userapi.interfaces.http.controllers.users_controller import UsersController  # noqa: E402
from userapi.shared.middleware.error_handler import configure_error_handling  # noqa: E402

START = 1_700_000_000.0


class FakeClock:
    def __init__(self, now: float = START) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def list_all(self) -> Sequence[User]:
        return [self._users[key] for key in sorted(self._users)]

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def insert(self, name: str, email: str, password_hash: str) -> User:
        user = User(id=self._seq, name=name, email=email, password_hash=password_hash)
        self._seq += 1
        self._users[user.id] = user
        return user

    def update_by_id(
        self, user_id: int, name: str, email: str, password_hash: str
    ) -> User | None:
        if user_id not in self._users:
            return None
        user = User(id=user_id, name=name, email=email, password_hash=password_hash)
        self._users[user_id] = user
        return user

    def delete_by_id(self, user_id: int) -> User | None:
        return self._users.pop(user_id, None)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def token_service(clock: FakeClock) -> JwtTokenService:
    return JwtTokenService(TokenSettings(secret="unit-test-secret"), clock=clock)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


def build_app(
    users: UserRepository,
    hasher: PasswordHasher,
    tokens: JwtTokenService,
) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    auth = AuthController(
        login_use_case=LoginUserUseCase(users=users, tokens=tokens, password_hasher=hasher),
        current_user_use_case=GetCurrentUserUseCase(users=users),
        tokens=tokens,
    )
    users_controller = UsersController(
        list_use_case=ListUsersUseCase(users=users),
        create_use_case=CreateUserUseCase(users=users, password_hasher=hasher),
        delete_use_case=DeleteUserUseCase(users=users),
        update_use_case=UpdateUserUseCase(users=users, password_hasher=hasher),
        tokens=tokens,
    )
    app.register_blueprint(auth.as_blueprint())
    app.register_blueprint(users_controller.as_blueprint())
    return app


@pytest.fixture()
def flask_app(
    users: InMemoryUserRepository,
    hasher: DeterministicHasher,
    token_service: JwtTokenService,
) -> Flask:
    return build_app(users, hasher, token_service)
