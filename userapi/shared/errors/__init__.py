from .base import (
    AppError,
    AuthError,
    InfrastructureError,
    InternalError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthError",
    "InfrastructureError",
    "InternalError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
