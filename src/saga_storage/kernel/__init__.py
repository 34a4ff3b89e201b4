"""Kernel – framework-agnostic building blocks (errors, identifiers)."""

from saga_storage.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
