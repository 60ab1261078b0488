"""Application service: Create Order use case.

Runs the reservation saga: verify every line against the catalog, build
the Order, take the stock, then persist.  If the process dies between
taking stock and saving, the stock stays taken with no order behind it.
"""

from __future__ import annotations

import logging

from orderflow.application.dto import OrderItemSpec
from orderflow.domain.model.order import Order, OrderItem
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.service.product_availability import ProductAvailability
from orderflow.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_availability: ProductAvailability,
    ) -> None:
        self._order_repo = order_repo
        self._reservations = StockReservationService(product_availability)

    def execute(self, customer_id: str, item_specs: list[OrderItemSpec]) -> Order:
        """Place a new order for ``customer_id``.

        Steps:
        1. Check every product exists and has enough stock (no mutation).
        2. Build the Order; the aggregate validates its own invariants.
        3. Decrement stock for each line item, one call at a time.
        4. Persist and return the stored order.
        """
        catalog = self._reservations.verify_availability(
            (spec.product_id, spec.quantity) for spec in item_specs
        )

        line_items: list[OrderItem] = []
        for spec in item_specs:
            product = catalog[spec.product_id]
            line_items.append(
                OrderItem.of(
                    product_id=spec.product_id,
                    product_name=spec.product_name or product.name,
                    quantity=spec.quantity,
                    unit_price=(
                        product.price if spec.unit_price is None else spec.unit_price
                    ),
                )
            )
        order = Order(customer_id=customer_id, items=line_items)

        self._reservations.reserve_for_order(order)

        saved = self._order_repo.save(order)
        logger.info(
            "Created order %s for customer %s (%d items, total %s)",
            saved.id,
            saved.customer_id,
            len(saved.items),
            saved.total_amount,
        )
        return saved
