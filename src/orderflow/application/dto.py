"""Data Transfer Objects — plain containers that cross layer boundaries.

Inputs describe what a caller asked for; outputs are formatted for the CLI
so it never reaches into domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from orderflow.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line.

    ``unit_price`` and ``product_name`` fall back to the catalog's values
    when left out.
    """

    product_id: str
    quantity: int
    unit_price: str | float | int | Decimal | None = None
    product_name: str | None = None


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str
    updated_at: str

    @classmethod
    def from_order(cls, order: Order) -> OrderDTO:
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            status=order.status.value,
            items=[
                OrderLineItemDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=str(item.unit_price),
                    subtotal=str(item.subtotal),
                )
                for item in order.items
            ],
            total=str(order.total_amount),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            updated_at=order.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
