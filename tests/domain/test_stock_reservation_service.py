"""Unit tests for the StockReservationService domain service."""

import pytest

from orderflow.domain.exceptions import InsufficientStockError, ProductNotFoundError
from orderflow.domain.model.order import Order, OrderItem
from orderflow.domain.service.stock_reservation_service import (
    StockReservationService,
)
from tests.fakes import FakeProductAvailability


def _order(*lines: tuple[str, int]) -> Order:
    return Order(
        "c1",
        [OrderItem.of(pid, pid.upper(), qty, "10.00") for pid, qty in lines],
    )


class TestVerifyAvailability:

    def test_returns_catalog_view(self):
        catalog = FakeProductAvailability({"p1": ("Widget", 5, "9.99")})
        svc = StockReservationService(catalog)
        seen = svc.verify_availability([("p1", 5)])
        assert seen["p1"].name == "Widget"
        assert seen["p1"].in_stock == 5

    def test_unknown_product(self):
        catalog = FakeProductAvailability({"p1": ("Widget", 5, "9.99")})
        svc = StockReservationService(catalog)
        with pytest.raises(ProductNotFoundError, match="product p2 not found"):
            svc.verify_availability([("p1", 1), ("p2", 1)])
        assert catalog.adjustments == []

    def test_insufficient_stock_names_product(self):
        catalog = FakeProductAvailability({"p1": ("Widget", 1, "9.99")})
        svc = StockReservationService(catalog)
        with pytest.raises(InsufficientStockError, match="Widget"):
            svc.verify_availability([("p1", 2)])

    def test_stops_at_first_failure(self):
        catalog = FakeProductAvailability({"p2": ("Gadget", 5, "1")})
        svc = StockReservationService(catalog)
        with pytest.raises(ProductNotFoundError):
            svc.verify_availability([("p1", 1), ("p2", 1)])
        assert catalog.checks == ["p1"]


class TestReserveAndRestore:

    def test_reserve_decrements_each_line_in_order(self):
        catalog = FakeProductAvailability(
            {"p1": ("Widget", 10, "1"), "p2": ("Gadget", 10, "1")}
        )
        svc = StockReservationService(catalog)
        failed = svc.reserve_for_order(_order(("p1", 2), ("p2", 3)))
        assert failed == []
        assert catalog.adjustments == [("p1", -2), ("p2", -3)]
        assert catalog.in_stock("p1") == 8

    def test_restore_increments_each_line(self):
        catalog = FakeProductAvailability({"p1": ("Widget", 0, "1")})
        svc = StockReservationService(catalog)
        svc.restore_for_order(_order(("p1", 2)))
        assert catalog.adjustments == [("p1", 2)]
        assert catalog.in_stock("p1") == 2

    def test_failed_adjustment_does_not_stop_the_loop(self, caplog):
        catalog = FakeProductAvailability(
            {"p1": ("Widget", 10, "1"), "p2": ("Gadget", 10, "1")},
            failing={"p1"},
        )
        svc = StockReservationService(catalog)
        failed = svc.reserve_for_order(_order(("p1", 2), ("p2", 3)))
        assert failed == ["p1"]
        assert catalog.adjustments == [("p1", -2), ("p2", -3)]
        assert catalog.in_stock("p1") == 10
        assert "p1" in caplog.text
