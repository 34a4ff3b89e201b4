"""Sagas – SagaStorage port."""

from __future__ import annotations

import abc
from typing import Any, Iterable, TypeVar

from saga_storage.sagas.correlation import CorrelationProperty
from saga_storage.sagas.data import SagaData

S = TypeVar("S", bound=SagaData)

#: A correlation declaration: a :class:`CorrelationProperty` or a bare name.
CorrelationSpec = CorrelationProperty | str


class SagaStorage(abc.ABC):
    """Port — find, create, update and delete saga data.

    All operations are synchronous. Implementations must never let the
    caller's objects alias the stored state.
    """

    @abc.abstractmethod
    def find(
        self,
        saga_data_type: type[S],
        property_name: str,
        property_value: Any,
    ) -> S | None:
        """Return a copy of the first *saga_data_type* instance whose
        *property_name* matches *property_value*, or ``None``."""

    @abc.abstractmethod
    def insert(
        self,
        saga_data: SagaData,
        correlation_properties: Iterable[CorrelationSpec] = (),
    ) -> None:
        """Store new saga data; never overwrites an existing instance."""

    @abc.abstractmethod
    def update(
        self,
        saga_data: SagaData,
        correlation_properties: Iterable[CorrelationSpec] = (),
    ) -> None:
        """Replace stored saga data under optimistic concurrency control."""

    @abc.abstractmethod
    def delete(self, saga_data: SagaData) -> None:
        """Remove stored saga data."""


__all__ = ["CorrelationSpec", "SagaStorage"]
