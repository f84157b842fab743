from .base import AppError, DomainError, ValidationError
from .http import register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "ValidationError",
    "register_error_handler",
]
