"""Core utilities: exceptions and middleware."""

from marketplace.core.exceptions import (
    AppException,
    ConflictError,
    NotFoundError,
    RateLimitExceeded,
    StorageError,
    ValidationError,
)

__all__ = [
    "AppException",
    "ConflictError",
    "NotFoundError",
    "RateLimitExceeded",
    "StorageError",
    "ValidationError",
]
