"""Tests for the permissive must_* operations."""

from dataclasses import dataclass

import pytest

from recordkit import (
    ErrorKind,
    FieldNotFoundError,
    NilValueError,
    RecordPanic,
    Ref,
    must_copy_fields,
    must_field,
    must_field_is_type,
    must_filter_fields,
    must_has_field,
    must_replace_fields_type,
    must_resolve,
)


@dataclass
class Order:
    id: int
    total: float


@pytest.fixture
def order():
    return Order(id=7, total=12.5)


def test_must_variants_return_results(order):
    dst = Ref(Order(id=0, total=0.0))

    must_copy_fields(order, dst)

    assert dst.unwrap() == order
    assert must_resolve(order).record is order
    assert must_field(order, "total") == 12.5
    assert must_has_field(order, "id") is True
    assert must_field_is_type(order, "id", 0) is True
    assert must_field_is_type(order, "missing", 0) is False
    assert must_filter_fields(order, "id").id == 0
    assert must_replace_fields_type(order, {"id": ""}).id == ""


@pytest.mark.parametrize(
    "call",
    [
        lambda: must_resolve(None),
        lambda: must_copy_fields(None, Ref(Order(0, 0.0))),
        lambda: must_replace_fields_type(None, {}),
        lambda: must_filter_fields(None, "id"),
        lambda: must_has_field(None, "id"),
        lambda: must_field(None, "id"),
        lambda: must_field_is_type(None, "id", 0),
    ],
)
def test_nil_value_aborts(call):
    """A nil input aborts instead of returning a zero value."""
    with pytest.raises(RecordPanic) as excinfo:
        call()

    assert excinfo.value.kind is ErrorKind.NIL_VALUE
    assert isinstance(excinfo.value.__cause__, NilValueError)


def test_missing_field_aborts(order):
    with pytest.raises(RecordPanic) as excinfo:
        must_has_field(order, "customer")

    assert isinstance(excinfo.value.error, FieldNotFoundError)
    assert excinfo.value.error.field_name == "customer"


def test_not_a_reference_aborts(order):
    with pytest.raises(RecordPanic) as excinfo:
        must_copy_fields(order, Order(0, 0.0))

    assert excinfo.value.kind is ErrorKind.NOT_A_REFERENCE


def test_panic_is_not_an_ordinary_exception(order):
    with pytest.raises(RecordPanic):
        try:
            must_field(order, "customer")
        except Exception:  # noqa: BLE001
            pytest.fail("must_field failure was caught as an ordinary exception")
