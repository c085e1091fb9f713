from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from userapi.application.services.password_hashing import MAX_PASSWORD_BYTES
from userapi.domain.users.entities import User


class UserFieldsDTO(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise PydanticCustomError(
                "password_too_long",
                "Password must be at most {max_bytes} bytes",
                {"max_bytes": MAX_PASSWORD_BYTES},
            )
        return value


class CreateUserRequestDTO(UserFieldsDTO):
    pass


class UpdateUserRequestDTO(UserFieldsDTO):
    pass


class UserDTO(BaseModel):
    """Outbound user representation; never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls.model_validate(user)
