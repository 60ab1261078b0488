"""Application service: Cancel Order use case.

Cancelling gives the reserved stock back to the catalog before the order
is marked CANCELLED.  Cancelling twice is harmless: the second call
returns the order untouched.
"""

from __future__ import annotations

import logging

from orderflow.domain.exceptions import IllegalCancellationError
from orderflow.domain.model.order import Order, OrderStatus
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.service.product_availability import ProductAvailability
from orderflow.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_availability: ProductAvailability,
    ) -> None:
        self._order_repo = order_repo
        self._reservations = StockReservationService(product_availability)

    def execute(self, order_id: str) -> Order | None:
        order = self._order_repo.find_by_id(order_id)
        if order is None:
            return None

        if order.status is OrderStatus.DELIVERED:
            raise IllegalCancellationError("cannot cancel a delivered order")
        if order.status is OrderStatus.CANCELLED:
            return order

        self._reservations.restore_for_order(order)
        order.update_status(OrderStatus.CANCELLED)

        updated = self._order_repo.update(order)
        logger.info("Cancelled order %s", updated.id)
        return updated
