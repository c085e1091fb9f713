# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class User:

    id: int
    name: str
    email: str
    password_hash: str


@dataclass(slots=True, frozen=True)
class TokenClaims:

    user_id: str
    issued_at: int
    expires_at: int
