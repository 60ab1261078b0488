"""Domain service: Stock Reservation.

Holds the steps of the order saga that touch the product catalog:

  1. ``verify_availability`` — read-only; every requested product must
     exist and hold enough stock.  Fails before anything is mutated.
  2. ``reserve_for_order`` — take each line item's quantity out of stock.
  3. ``restore_for_order`` — put each line item's quantity back.

Steps 2 and 3 run one call per item, in line-item order, and do not roll
back earlier calls when a later one fails; a failed adjustment is logged
and the loop moves on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from orderflow.domain.exceptions import InsufficientStockError, ProductNotFoundError
from orderflow.domain.model.order import Order
from orderflow.domain.service.product_availability import (
    ProductAvailability,
    ProductStock,
)

logger = logging.getLogger(__name__)


class StockReservationService:

    def __init__(self, availability: ProductAvailability) -> None:
        self._availability = availability

    def verify_availability(
        self, requests: Iterable[tuple[str, int]]
    ) -> dict[str, ProductStock]:
        """Check every ``(product_id, quantity)`` pair against the catalog.

        Each pair is checked on its own; two lines for the same product are
        not summed.  Returns the catalog view of every product seen.
        """
        seen: dict[str, ProductStock] = {}
        for product_id, quantity in requests:
            product = self._availability.check(product_id)
            if product is None:
                raise ProductNotFoundError(f"product {product_id} not found")
            if product.in_stock < quantity:
                raise InsufficientStockError(
                    f"insufficient stock for product {product.name}"
                )
            seen[product_id] = product
        return seen

    def reserve_for_order(self, order: Order) -> list[str]:
        """Take stock for every line item; returns the product IDs that failed."""
        return self._adjust(order, sign=-1)

    def restore_for_order(self, order: Order) -> list[str]:
        """Give back stock for every line item; returns the product IDs that failed."""
        return self._adjust(order, sign=1)

    def _adjust(self, order: Order, sign: int) -> list[str]:
        failed: list[str] = []
        for item in order.items:
            delta = sign * item.quantity
            if not self._availability.adjust_stock(item.product_id, delta):
                logger.warning(
                    "Stock adjustment of %+d for product %s failed (order %s)",
                    delta,
                    item.product_id,
                    order.id,
                )
                failed.append(item.product_id)
        return failed
