"""Sagas – CorrelationProperty."""

from __future__ import annotations

import dataclasses

from saga_storage.kernel.errors import ValidationError


@dataclasses.dataclass(frozen=True, slots=True)
class CorrelationProperty:
    """Names a saga data field whose value must be unique across instances.

    When ``saga_data_type`` is set the declaration only applies to saga data
    of that type (or a subclass of it).
    """

    property_name: str
    saga_data_type: type | None = None

    def __post_init__(self) -> None:
        if not self.property_name or not self.property_name.strip():
            raise ValidationError("CorrelationProperty requires a property name")

    def applies_to(self, saga_data_type: type) -> bool:
        return self.saga_data_type is None or issubclass(saga_data_type, self.saga_data_type)


def correlation_properties(
    *property_names: str,
    saga_data_type: type | None = None,
) -> list[CorrelationProperty]:
    """Build one :class:`CorrelationProperty` per name."""
    return [CorrelationProperty(name, saga_data_type) for name in property_names]


__all__ = ["CorrelationProperty", "correlation_properties"]
