from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class TokenDTO(BaseModel):
    jwt: str
