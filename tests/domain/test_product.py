"""Unit tests for the Product aggregate."""

import pytest

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.product import Product, ProductPatch
from orderflow.domain.model.value_objects import Money


def _product(**overrides) -> Product:
    fields = {"name": "Widget", "price": Money.of("15.00"), "in_stock": 10}
    fields.update(overrides)
    return Product(**fields)


class TestProductCreation:

    def test_defaults(self):
        p = _product()
        assert p.id
        assert p.description == ""
        assert p.updated_at == p.created_at

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name cannot be empty"):
            _product(name=" ")

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="price must be greater than zero"):
            _product(price=Money.zero())

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product(in_stock=-1)


class TestAdjustStock:

    def test_decrement_and_increment(self):
        p = _product(in_stock=10)
        p.adjust_stock(-4)
        assert p.in_stock == 6
        p.adjust_stock(2)
        assert p.in_stock == 8

    def test_down_to_zero_allowed(self):
        p = _product(in_stock=3)
        p.adjust_stock(-3)
        assert p.in_stock == 0

    def test_below_zero_rejected(self):
        p = _product(in_stock=3)
        with pytest.raises(ValidationError, match="below zero"):
            p.adjust_stock(-4)
        assert p.in_stock == 3


class TestApplyPatch:

    def test_only_present_fields_change(self):
        p = _product(description="old", category="tools")
        p.apply_patch(ProductPatch(price=Money.of("20.00"), in_stock=3))
        assert p.price == Money.of("20.00")
        assert p.in_stock == 3
        assert p.name == "Widget"
        assert p.description == "old"
        assert p.category == "tools"

    def test_empty_patch_is_noop(self):
        p = _product()
        stamp = p.updated_at
        p.apply_patch(ProductPatch())
        assert p.updated_at == stamp

    def test_invalid_patch_leaves_product_untouched(self):
        p = _product()
        with pytest.raises(ValidationError, match="cannot be negative"):
            p.apply_patch(ProductPatch(name="Renamed", in_stock=-2))
        assert p.name == "Widget"
        assert p.in_stock == 10

    def test_blank_name_in_patch_rejected(self):
        p = _product()
        with pytest.raises(ValidationError, match="name cannot be empty"):
            p.apply_patch(ProductPatch(name=""))
        assert p.name == "Widget"
