"""Sagas – SagaData base record and the default field accessor."""

from __future__ import annotations

import copy
import dataclasses
import uuid
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from saga_storage.kernel.types.ids import NIL_SAGA_ID
from saga_storage.sagas.errors import SagaFieldError

S = TypeVar("S", bound="SagaData")


@dataclasses.dataclass(kw_only=True)
class SagaData:
    """Base class for the state of one saga instance.

    Subclass it with the workflow's own fields::

        @dataclasses.dataclass
        class OrderSagaData(SagaData):
            order_code: str = ""
            lines: list[str] = dataclasses.field(default_factory=list)

    ``id`` must be set (see :func:`~saga_storage.kernel.types.new_saga_id`)
    before the data is handed to a storage. ``revision`` is owned by the
    storage: it starts at 0 and is advanced by every successful update.
    """

    id: uuid.UUID = NIL_SAGA_ID
    revision: int = 0

    def correlation_fields(self) -> dict[str, Any]:
        """Return the fields that may be used for correlation, by name.

        Every dataclass field by default. Override to expose derived values.
        """
        return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}

    def clone(self: S) -> S:
        """Return a fully independent copy of the same runtime type."""
        return copy.deepcopy(self)


#: ``(saga_data, property_name) -> value``
FieldAccessor = Callable[[SagaData, str], Any]

#: ``(saga_data) -> independent copy``
Cloner = Callable[[SagaData], SagaData]


def read_field(data: SagaData, path: str) -> Any:
    """Resolve *path* (``"code"`` or dotted ``"order.code"``) on *data*.

    The first segment is looked up in :meth:`SagaData.correlation_fields`,
    later segments in nested saga data, dataclasses or mappings. A ``None``
    along the way yields ``None``.

    Raises :class:`~saga_storage.sagas.errors.SagaFieldError` for unknown
    names.
    """
    head, *rest = path.split(".")
    fields = data.correlation_fields()
    if head not in fields:
        raise SagaFieldError(type(data), path)
    value = fields[head]
    for segment in rest:
        if value is None:
            return None
        children = _children_of(value)
        if children is None or segment not in children:
            raise SagaFieldError(type(data), path)
        value = children[segment]
    return value


def clone_saga_data(data: SagaData) -> SagaData:
    """Default :data:`Cloner`: delegate to :meth:`SagaData.clone`."""
    return data.clone()


def _children_of(value: Any) -> Mapping[str, Any] | None:
    if isinstance(value, SagaData):
        return value.correlation_fields()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return value
    return None


__all__ = ["Cloner", "FieldAccessor", "SagaData", "clone_saga_data", "read_field"]
