"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    └── ApplicationError     (application.py)

Saga storage errors (``saga_storage.sagas.errors``) extend the domain
branch.
"""

from saga_storage.kernel.errors.application import ApplicationError
from saga_storage.kernel.errors.base import BaseError
from saga_storage.kernel.errors.domain import (
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
