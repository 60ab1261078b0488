"""Application service: Update Order Status use case.

Moves an order along PENDING / PAID / SHIPPED / DELIVERED.  CANCELLED is
refused here because only CancelOrderHandler gives the stock back.
"""

from __future__ import annotations

import logging

from orderflow.domain.exceptions import IllegalTransitionRequestError
from orderflow.domain.model.order import Order, OrderStatus
from orderflow.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def execute(self, order_id: str, status: OrderStatus | str) -> Order | None:
        new_status = OrderStatus.parse(status)
        # Checked before the lookup: the answer is the same whether or not
        # the order exists.
        if new_status is OrderStatus.CANCELLED:
            raise IllegalTransitionRequestError(
                "cannot set status to CANCELLED via this path"
            )

        order = self._order_repo.find_by_id(order_id)
        if order is None:
            return None

        previous = order.status
        order.update_status(new_status)

        updated = self._order_repo.update(order)
        logger.info(
            "Order %s status %s -> %s", updated.id, previous.value, new_status.value
        )
        return updated
