"""Sagas – saga data, correlation and in-memory storage."""

from saga_storage.sagas.correlation import CorrelationProperty, correlation_properties
from saga_storage.sagas.data import Cloner, FieldAccessor, SagaData, clone_saga_data, read_field
from saga_storage.sagas.errors import (
    ConcurrencyViolationError,
    CorrelationConflictError,
    DuplicateSagaIdError,
    IdentifierMissingError,
    InvalidRevisionError,
    SagaFieldError,
    SagaNotFoundError,
    StaleRevisionError,
)
from saga_storage.sagas.memory import InMemorySagaStorage
from saga_storage.sagas.retry import ConcurrencyRetryPolicy
from saga_storage.sagas.storage import CorrelationSpec, SagaStorage

__all__ = [
    "Cloner",
    "ConcurrencyRetryPolicy",
    "ConcurrencyViolationError",
    "CorrelationConflictError",
    "CorrelationProperty",
    "CorrelationSpec",
    "DuplicateSagaIdError",
    "FieldAccessor",
    "IdentifierMissingError",
    "InMemorySagaStorage",
    "InvalidRevisionError",
    "SagaData",
    "SagaFieldError",
    "SagaNotFoundError",
    "SagaStorage",
    "StaleRevisionError",
    "clone_saga_data",
    "correlation_properties",
    "read_field",
]
