"""Unit tests for SagaData, read_field and CorrelationProperty."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from saga_storage.kernel.errors import ValidationError
from saga_storage.kernel.types import NIL_SAGA_ID, new_saga_id
from saga_storage.sagas import (
    CorrelationProperty,
    SagaData,
    SagaFieldError,
    clone_saga_data,
    correlation_properties,
    read_field,
)


@dataclasses.dataclass
class Address:
    city: str
    zip_code: str | None = None


@dataclasses.dataclass
class CheckoutSagaData(SagaData):
    cart_id: str = ""
    address: Address | None = None
    metadata: dict[str, Any] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass
class ExpressCheckoutSagaData(CheckoutSagaData):
    courier: str = "fast"


@dataclasses.dataclass
class InvoiceSagaData(SagaData):
    number: int = 0
    year: int = 2024

    def correlation_fields(self) -> dict[str, Any]:
        fields = super().correlation_fields()
        fields["invoice_key"] = f"{self.year}-{self.number:05d}"
        return fields


# ---------------------------------------------------------------------------
# SagaData
# ---------------------------------------------------------------------------


class TestSagaData:
    def test_defaults(self) -> None:
        data = CheckoutSagaData()
        assert data.id == NIL_SAGA_ID
        assert data.revision == 0

    def test_base_fields_are_keyword_only(self) -> None:
        data = CheckoutSagaData("cart-1", id=new_saga_id())
        assert data.cart_id == "cart-1"

    def test_correlation_fields_include_every_field(self) -> None:
        data = CheckoutSagaData(id=new_saga_id(), cart_id="c")
        assert set(data.correlation_fields()) == {"id", "revision", "cart_id", "address", "metadata"}

    def test_clone_is_deep(self) -> None:
        data = CheckoutSagaData(
            id=new_saga_id(),
            address=Address(city="Lisbon"),
            metadata={"tags": ["a"]},
        )
        copy_ = data.clone()
        assert copy_ == data
        assert copy_ is not data
        copy_.address.city = "Porto"  # type: ignore[union-attr]
        copy_.metadata["tags"].append("b")
        assert data.address.city == "Lisbon"  # type: ignore[union-attr]
        assert data.metadata == {"tags": ["a"]}

    def test_clone_preserves_subtype(self) -> None:
        data: CheckoutSagaData = ExpressCheckoutSagaData(id=new_saga_id(), courier="bike")
        copy_ = clone_saga_data(data)
        assert type(copy_) is ExpressCheckoutSagaData
        assert copy_.courier == "bike"  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# read_field
# ---------------------------------------------------------------------------


class TestReadField:
    def test_top_level_field(self) -> None:
        data = CheckoutSagaData(cart_id="cart-9")
        assert read_field(data, "cart_id") == "cart-9"

    def test_nested_dataclass(self) -> None:
        data = CheckoutSagaData(address=Address(city="Lisbon", zip_code="1000"))
        assert read_field(data, "address.zip_code") == "1000"

    def test_nested_mapping(self) -> None:
        data = CheckoutSagaData(metadata={"channel": {"name": "web"}})
        assert read_field(data, "metadata.channel.name") == "web"

    def test_none_along_path_yields_none(self) -> None:
        data = CheckoutSagaData(address=None)
        assert read_field(data, "address.city") is None

    def test_derived_field(self) -> None:
        data = InvoiceSagaData(number=42, year=2025)
        assert read_field(data, "invoice_key") == "2025-00042"

    def test_unknown_field(self) -> None:
        with pytest.raises(SagaFieldError) as exc_info:
            read_field(CheckoutSagaData(), "nope")
        err = exc_info.value
        assert isinstance(err, ValidationError)
        assert err.property_name == "nope"
        assert err.detail["saga_type"] == "CheckoutSagaData"

    def test_unknown_nested_field(self) -> None:
        data = CheckoutSagaData(address=Address(city="Lisbon"))
        with pytest.raises(SagaFieldError):
            read_field(data, "address.street")

    def test_cannot_descend_into_scalar(self) -> None:
        with pytest.raises(SagaFieldError):
            read_field(CheckoutSagaData(cart_id="x"), "cart_id.length")


# ---------------------------------------------------------------------------
# CorrelationProperty
# ---------------------------------------------------------------------------


class TestCorrelationProperty:
    def test_applies_to_any_type_by_default(self) -> None:
        prop = CorrelationProperty("cart_id")
        assert prop.applies_to(CheckoutSagaData)
        assert prop.applies_to(InvoiceSagaData)

    def test_applies_to_declared_type_and_subtypes(self) -> None:
        prop = CorrelationProperty("cart_id", saga_data_type=CheckoutSagaData)
        assert prop.applies_to(CheckoutSagaData)
        assert prop.applies_to(ExpressCheckoutSagaData)
        assert not prop.applies_to(InvoiceSagaData)

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CorrelationProperty("  ")

    def test_is_frozen(self) -> None:
        prop = CorrelationProperty("cart_id")
        with pytest.raises((AttributeError, TypeError)):
            prop.property_name = "other"  # type: ignore[misc]

    def test_builder(self) -> None:
        props = correlation_properties("a", "b", saga_data_type=InvoiceSagaData)
        assert [p.property_name for p in props] == ["a", "b"]
        assert all(p.saga_data_type is InvoiceSagaData for p in props)
