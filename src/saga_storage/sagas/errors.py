"""Sagas – storage error taxonomy.

Hierarchy::

    ValidationError
    ├── IdentifierMissingError     caller bug: saga data without an id
    ├── InvalidRevisionError       caller bug: insert with revision != 0
    └── SagaFieldError             unknown correlation property name
    NotFoundError
    └── SagaNotFoundError          update/delete target is gone
    ConflictError
    ├── DuplicateSagaIdError       insert of an id that already exists
    └── ConcurrencyViolationError  lost race; retry the triggering message
        ├── CorrelationConflictError
        └── StaleRevisionError
"""

from __future__ import annotations

import uuid
from typing import Any

from saga_storage.kernel.errors import ConflictError, NotFoundError, ValidationError


class IdentifierMissingError(ValidationError):
    """Saga data was handed to the storage without a usable id."""

    default_code = "saga_identifier_missing"

    def __init__(self, saga_data_type: type | None = None) -> None:
        type_name = saga_data_type.__name__ if saga_data_type is not None else None
        super().__init__(
            "Saga data must be provided with an ID in order to do this",
            detail={"saga_type": type_name},
        )
        self.saga_data_type = saga_data_type


class InvalidRevisionError(ValidationError):
    """Fresh saga data must be inserted with revision 0."""

    default_code = "invalid_revision"

    def __init__(self, saga_id: uuid.UUID, revision: int) -> None:
        super().__init__(
            f"Attempted to insert saga data with ID {saga_id} and revision {revision}, "
            "but revision must be 0 on first insert",
            detail={"saga_id": str(saga_id), "revision": revision},
        )
        self.saga_id = saga_id
        self.revision = revision


class SagaFieldError(ValidationError):
    """The requested property does not exist on the saga data."""

    default_code = "saga_field_error"

    def __init__(self, saga_data_type: type, property_name: str) -> None:
        super().__init__(
            f"{saga_data_type.__name__} has no correlation field '{property_name}'",
            detail={"saga_type": saga_data_type.__name__, "property_name": property_name},
        )
        self.saga_data_type = saga_data_type
        self.property_name = property_name


class SagaNotFoundError(NotFoundError):
    """Update/delete target no longer exists (typically completed concurrently)."""

    default_code = "saga_not_found"

    def __init__(self, saga_id: uuid.UUID, operation: str) -> None:
        super().__init__(
            "Saga data",
            saga_id,
            message=f"Saga data with ID {saga_id} no longer exists and cannot be {operation}",
            detail={"saga_id": str(saga_id), "operation": operation},
        )
        self.saga_id = saga_id
        self.operation = operation


class DuplicateSagaIdError(ConflictError):
    """Insert of an id that is already stored; use update instead."""

    default_code = "duplicate_saga_id"

    def __init__(self, saga_id: uuid.UUID) -> None:
        super().__init__(
            f"Saga data with ID {saga_id} already exists",
            detail={"saga_id": str(saga_id)},
        )
        self.saga_id = saga_id


class ConcurrencyViolationError(ConflictError):
    """A concurrent writer won the race.

    The expected response is to re-run the triggering message from scratch
    (find, apply, update) rather than treating the failure as fatal.
    """

    default_code = "concurrency_violation"

    def __init__(self, message: str, *, saga_id: uuid.UUID, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.saga_id = saga_id


class CorrelationConflictError(ConcurrencyViolationError):
    """Another saga instance already holds the correlation value."""

    default_code = "correlation_conflict"

    def __init__(
        self,
        *,
        saga_id: uuid.UUID,
        property_name: str,
        value: Any,
        existing_saga_id: uuid.UUID,
    ) -> None:
        super().__init__(
            f"Correlation property '{property_name}' has value '{value}' "
            f"in existing saga data with ID {existing_saga_id}",
            saga_id=saga_id,
            detail={
                "saga_id": str(saga_id),
                "property_name": property_name,
                "value": value,
                "existing_saga_id": str(existing_saga_id),
            },
        )
        self.property_name = property_name
        self.value = value
        self.existing_saga_id = existing_saga_id


class StaleRevisionError(ConcurrencyViolationError):
    """The stored revision moved on since the caller read the saga data."""

    default_code = "stale_revision"

    def __init__(self, *, saga_id: uuid.UUID, revision: int, current_revision: int) -> None:
        super().__init__(
            f"Attempted to update saga data with ID {saga_id} with revision {revision}, "
            f"but the existing data was updated to revision {current_revision}",
            saga_id=saga_id,
            detail={
                "saga_id": str(saga_id),
                "revision": revision,
                "current_revision": current_revision,
            },
        )
        self.revision = revision
        self.current_revision = current_revision


__all__ = [
    "ConcurrencyViolationError",
    "CorrelationConflictError",
    "DuplicateSagaIdError",
    "IdentifierMissingError",
    "InvalidRevisionError",
    "SagaFieldError",
    "SagaNotFoundError",
    "StaleRevisionError",
]
