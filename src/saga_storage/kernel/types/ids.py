"""128-bit saga identifiers."""

from __future__ import annotations

import uuid

import uuid_utils.compat as uuid_compat

#: The all-zero UUID. Never a valid identifier for stored saga data.
NIL_SAGA_ID = uuid.UUID(int=0)


def new_saga_id() -> uuid.UUID:
    """Return a new time-ordered (v7) :class:`uuid.UUID`."""
    return uuid_compat.uuid7()


def is_nil_id(value: uuid.UUID | None) -> bool:
    """``True`` for ``None`` and for the nil UUID."""
    return value is None or value == NIL_SAGA_ID


__all__ = ["NIL_SAGA_ID", "is_nil_id", "new_saga_id"]
