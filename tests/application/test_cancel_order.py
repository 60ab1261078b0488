"""Integration tests for the CancelOrder use case."""

import pytest

from orderflow.application.cancel_order import CancelOrderHandler
from orderflow.domain.exceptions import IllegalCancellationError
from orderflow.domain.model.order import Order, OrderItem, OrderStatus
from tests.fakes import FakeOrderRepository, FakeProductAvailability


def _setup(status: OrderStatus = OrderStatus.PENDING):
    order = Order(
        "c1",
        [OrderItem.of("p1", "Widget", 2, "10.00")],
        order_id="o1",
        status=status,
    )
    order_repo = FakeOrderRepository([order])
    catalog = FakeProductAvailability({"p1": ("Widget", 8, "10.00")})
    handler = CancelOrderHandler(order_repo, catalog)
    return handler, order_repo, catalog, order


class TestCancelOrder:

    @pytest.mark.parametrize(
        "status", [OrderStatus.PENDING, OrderStatus.PAID, OrderStatus.SHIPPED]
    )
    def test_restores_stock_and_cancels(self, status):
        handler, order_repo, catalog, _ = _setup(status)

        result = handler.execute("o1")

        assert catalog.adjustments == [("p1", 2)]
        assert catalog.in_stock("p1") == 10
        assert result.status == OrderStatus.CANCELLED
        assert order_repo.updated == ["o1"]
        assert order_repo.find_by_id("o1").status == OrderStatus.CANCELLED

    def test_one_restore_per_line_item(self):
        order = Order(
            "c1",
            [
                OrderItem.of("p1", "Widget", 2, "10.00"),
                OrderItem.of("p2", "Gadget", 1, "5.00"),
            ],
            order_id="o2",
        )
        order_repo = FakeOrderRepository([order])
        catalog = FakeProductAvailability(
            {"p1": ("Widget", 0, "10.00"), "p2": ("Gadget", 0, "5.00")}
        )

        CancelOrderHandler(order_repo, catalog).execute("o2")

        assert catalog.adjustments == [("p1", 2), ("p2", 1)]

    def test_already_cancelled_is_returned_untouched(self):
        handler, order_repo, catalog, order = _setup(OrderStatus.CANCELLED)
        stamp = order.updated_at

        result = handler.execute("o1")

        assert result is order
        assert result.updated_at == stamp
        assert catalog.adjustments == []
        assert order_repo.updated == []

    def test_delivered_cannot_be_cancelled(self):
        handler, order_repo, catalog, order = _setup(OrderStatus.DELIVERED)

        with pytest.raises(IllegalCancellationError, match="cannot cancel a delivered order"):
            handler.execute("o1")

        assert catalog.adjustments == []
        assert order_repo.updated == []
        assert order.status == OrderStatus.DELIVERED

    def test_unknown_order_returns_none(self):
        handler, order_repo, catalog, _ = _setup()
        assert handler.execute("missing") is None
        assert catalog.adjustments == []
        assert order_repo.updated == []

    def test_failed_restore_still_cancels(self):
        handler, order_repo, catalog, _ = _setup()
        catalog._failing.add("p1")

        result = handler.execute("o1")

        assert result.status == OrderStatus.CANCELLED
        assert order_repo.updated == ["o1"]
