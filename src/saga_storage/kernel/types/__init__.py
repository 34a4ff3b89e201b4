"""Kernel types – identifier helpers."""

from saga_storage.kernel.types.ids import NIL_SAGA_ID, is_nil_id, new_saga_id

__all__ = ["NIL_SAGA_ID", "is_nil_id", "new_saga_id"]
