"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from userapi.domain.users.repositories import PasswordHasher

DEFAULT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the input
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt with a random per-hash salt.

    ``verify`` returns ``False`` for a wrong password, including one too long
    to have been hashed, and lets the ``ValueError`` from a malformed stored
    hash propagate.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        return bcrypt.checkpw(encoded, hashed.encode("ascii"))
