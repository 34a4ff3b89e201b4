"""Sagas – InMemorySagaStorage.

A volatile :class:`~saga_storage.sagas.storage.SagaStorage` that keeps saga
data in a dict keyed by id. Everything is lost when the process exits.

One lock guards every operation. Correlation uniqueness and the revision
check both have to be evaluated against a consistent view of *all* stored
instances, so there is no per-record locking.

Saga data is copied on the way in and on the way out; a caller can never
mutate what the storage holds, and vice versa.
"""

from __future__ import annotations

import contextlib
import threading
import uuid
from typing import Any, Iterable, Iterator, TypeVar

from saga_storage.kernel.errors import BaseError
from saga_storage.kernel.types.ids import is_nil_id
from saga_storage.observability.logging import get_logger
from saga_storage.sagas.correlation import CorrelationProperty
from saga_storage.sagas.data import (
    Cloner,
    FieldAccessor,
    SagaData,
    clone_saga_data,
    read_field,
)
from saga_storage.sagas.errors import (
    CorrelationConflictError,
    DuplicateSagaIdError,
    IdentifierMissingError,
    InvalidRevisionError,
    SagaFieldError,
    SagaNotFoundError,
    StaleRevisionError,
)
from saga_storage.sagas.storage import CorrelationSpec, SagaStorage

S = TypeVar("S", bound=SagaData)


class InMemorySagaStorage(SagaStorage):
    """Thread-safe in-memory saga storage.

    Parameters
    ----------
    field_accessor:
        ``(saga_data, property_name) -> value``. Defaults to
        :func:`~saga_storage.sagas.data.read_field`.
    cloner:
        ``(saga_data) -> copy``. Must return a fully independent value of
        the same runtime type. Defaults to :meth:`SagaData.clone`.

    Example::

        storage = InMemorySagaStorage()
        storage.insert(data, ["order_code"])
        found = storage.find(OrderSagaData, "order_code", "ABC")
        found.status = "paid"
        storage.update(found, ["order_code"])   # found.revision is now 1
    """

    def __init__(
        self,
        field_accessor: FieldAccessor | None = None,
        cloner: Cloner | None = None,
    ) -> None:
        self._data: dict[uuid.UUID, SagaData] = {}
        self._lock = threading.Lock()
        self._get_field: FieldAccessor = field_accessor or read_field
        self._clone: Cloner = cloner or clone_saga_data
        self._log = get_logger(__name__)

    # ------------------------------------------------------------------
    # SagaStorage
    # ------------------------------------------------------------------

    def find(
        self,
        saga_data_type: type[S],
        property_name: str,
        property_value: Any,
    ) -> S | None:
        """Look up saga data of exactly *saga_data_type* by property value.

        Both sides are compared by their string form (``None`` counts as
        ``""``), so a stored ``42`` matches a lookup for ``"42"``.
        """
        value_from_message = _as_text(property_value)

        with self._lock:
            for data in self._data.values():
                if type(data) is not saga_data_type:
                    continue
                value_from_saga = _as_text(self._get_field(data, property_name))
                if value_from_message == value_from_saga:
                    return self._clone(data)  # type: ignore[return-value]
        return None

    def insert(
        self,
        saga_data: SagaData,
        correlation_properties: Iterable[CorrelationSpec] = (),
    ) -> None:
        """Store a copy of *saga_data*.

        Raises :class:`DuplicateSagaIdError`, :class:`CorrelationConflictError`
        or :class:`InvalidRevisionError`, checked in that order. The caller's
        object is not modified.
        """
        with self._write("insert", saga_data):
            saga_id = self._get_id(saga_data)
            if saga_id in self._data:
                raise DuplicateSagaIdError(saga_id)

            self._verify_correlation_uniqueness(saga_data, saga_id, correlation_properties)

            if saga_data.revision != 0:
                raise InvalidRevisionError(saga_id, saga_data.revision)

            self._data[saga_id] = self._clone(saga_data)

        self._log.debug("saga_inserted", saga_id=str(saga_id), saga_type=type(saga_data).__name__)

    def update(
        self,
        saga_data: SagaData,
        correlation_properties: Iterable[CorrelationSpec] = (),
    ) -> None:
        """Replace the stored copy of *saga_data* and bump its revision.

        Raises :class:`SagaNotFoundError`, :class:`CorrelationConflictError`
        or :class:`StaleRevisionError`, checked in that order. On success
        ``saga_data.revision`` is advanced in place to match the stored copy.
        """
        with self._write("update", saga_data):
            saga_id = self._get_id(saga_data)
            existing = self._data.get(saga_id)
            if existing is None:
                raise SagaNotFoundError(saga_id, "updated")

            self._verify_correlation_uniqueness(saga_data, saga_id, correlation_properties)

            if existing.revision != saga_data.revision:
                raise StaleRevisionError(
                    saga_id=saga_id,
                    revision=saga_data.revision,
                    current_revision=existing.revision,
                )

            clone = self._clone(saga_data)
            clone.revision += 1
            self._data[saga_id] = clone
            saga_data.revision += 1

        self._log.debug(
            "saga_updated",
            saga_id=str(saga_id),
            saga_type=type(saga_data).__name__,
            revision=saga_data.revision,
        )

    def delete(self, saga_data: SagaData) -> None:
        """Remove *saga_data*; raises :class:`SagaNotFoundError` if absent."""
        with self._write("delete", saga_data):
            saga_id = self._get_id(saga_data)
            if saga_id not in self._data:
                raise SagaNotFoundError(saga_id, "deleted")
            del self._data[saga_id]

        self._log.debug("saga_deleted", saga_id=str(saga_id), saga_type=type(saga_data).__name__)

    # ------------------------------------------------------------------
    # Inspection (tests, diagnostics)
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, saga_id: object) -> bool:
        with self._lock:
            return saga_id in self._data

    def instances(self) -> list[SagaData]:
        """Return copies of every stored instance."""
        with self._lock:
            return [self._clone(data) for data in self._data.values()]

    def clear(self) -> None:
        """Drop every stored instance."""
        with self._lock:
            self._data.clear()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @contextlib.contextmanager
    def _write(self, operation: str, saga_data: SagaData) -> Iterator[None]:
        """Hold the lock for one write; log the rejection if it fails."""
        try:
            with self._lock:
                yield
        except BaseError as exc:
            self._log.info(
                "saga_write_rejected",
                operation=operation,
                saga_id=str(saga_data.id),
                saga_type=type(saga_data).__name__,
                code=exc.code,
            )
            raise

    @staticmethod
    def _get_id(saga_data: SagaData) -> uuid.UUID:
        saga_id = saga_data.id
        if is_nil_id(saga_id):
            raise IdentifierMissingError(type(saga_data))
        return saga_id

    def _verify_correlation_uniqueness(
        self,
        saga_data: SagaData,
        saga_id: uuid.UUID,
        correlation_properties: Iterable[CorrelationSpec],
    ) -> None:
        # Caller holds the lock. Every other stored instance is scanned,
        # whatever its type; values must be equal and of the same type.
        saga_type = type(saga_data)
        for spec in correlation_properties:
            prop = spec if isinstance(spec, CorrelationProperty) else CorrelationProperty(spec)
            if not prop.applies_to(saga_type):
                continue

            value_from_saga_data = self._get_field(saga_data, prop.property_name)

            for existing in self._data.values():
                if existing.id == saga_id:
                    continue

                value_from_existing = self._existing_value(existing, prop.property_name)
                if _same_value(value_from_saga_data, value_from_existing):
                    raise CorrelationConflictError(
                        saga_id=saga_id,
                        property_name=prop.property_name,
                        value=value_from_existing,
                        existing_saga_id=existing.id,
                    )

    def _existing_value(self, existing: SagaData, property_name: str) -> Any:
        """Read *property_name* from a stored instance; ``None`` if it has no such field."""
        try:
            return self._get_field(existing, property_name)
        except SagaFieldError:
            return None


def _same_value(left: Any, right: Any) -> bool:
    # True/1 and 1/1.0 are distinct correlation values.
    return type(left) is type(right) and left == right


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


__all__ = ["InMemorySagaStorage"]
