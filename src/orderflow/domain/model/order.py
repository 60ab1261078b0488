"""Order aggregate — the core of the domain.

The Order is an aggregate root that exclusively owns its line items.
Line items are fixed at construction; afterwards only the status (and
``updated_at`` with it) can change, through ``update_status()``.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from orderflow.domain.exceptions import (
    EmptyOrderError,
    InvalidTransitionError,
    ValidationError,
)
from orderflow.domain.model.value_objects import Money, to_decimal


def _now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Opaque, globally unique identifier for a new aggregate."""
    return uuid.uuid4().hex


class OrderStatus(Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value: OrderStatus | str) -> OrderStatus:
        """Accept a member or its name in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValidationError(f"invalid order status: {value!r}") from None


def _check_quantity(quantity: Any) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("quantity must be an integer")
    if quantity <= 0:
        raise ValidationError("quantity must be greater than zero")


@dataclass(frozen=True)
class OrderItem:
    """A line item with the unit price agreed when the order was placed."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.product_id, str) or not self.product_id.strip():
            raise ValidationError("product id is required")
        _check_quantity(self.quantity)
        if not self.unit_price.is_positive():
            raise ValidationError("unit price must be greater than zero")

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity

    @classmethod
    def of(
        cls,
        product_id: str,
        product_name: str | None,
        quantity: int,
        unit_price: Money | str | float | int | Decimal,
        currency: str = "USD",
    ) -> OrderItem:
        """Build an item from raw values; ``unit_price`` may be a plain number."""
        _check_quantity(quantity)
        if not isinstance(unit_price, Money):
            amount = to_decimal(unit_price)
            if amount <= 0:
                raise ValidationError("unit price must be greater than zero")
            unit_price = Money(amount, currency)
        return cls(
            product_id=product_id,
            product_name=product_name or "",
            quantity=quantity,
            unit_price=unit_price,
        )

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> OrderItem:
        return cls.of(
            product_id=raw.get("product_id"),  # type: ignore[arg-type]
            product_name=raw.get("product_name"),
            quantity=raw.get("quantity"),  # type: ignore[arg-type]
            unit_price=raw.get("unit_price"),  # type: ignore[arg-type]
            currency=raw.get("currency", "USD"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "unit_price": str(self.unit_price.amount),
            "currency": self.unit_price.currency,
        }


class Order:
    """Aggregate root for customer orders.

    Invariants:
    - there is at least one line item, and the set of items never changes
    - ``total_amount`` is the sum of item subtotals, computed once here
    - a CANCELLED order never changes status again; a DELIVERED order can
      only move to CANCELLED

    The same constructor serves new orders and orders reloaded from a
    repository, so persisted data is re-validated on the way in.
    """

    def __init__(
        self,
        customer_id: str,
        items: Iterable[OrderItem | Mapping[str, Any]],
        *,
        order_id: str | None = None,
        status: OrderStatus | str = OrderStatus.PENDING,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        if not isinstance(customer_id, str) or not customer_id.strip():
            raise ValidationError("customer id is required")

        line_items = tuple(
            item if isinstance(item, OrderItem) else OrderItem.from_dict(item)
            for item in items
        )
        if not line_items:
            raise EmptyOrderError("order must contain at least one item")

        self._id = order_id or new_id()
        self._customer_id = customer_id
        self._items = line_items
        self._status = OrderStatus.parse(status)
        self._total_amount = self._calculate_total(line_items)
        self._created_at = created_at or _now()
        self._updated_at = updated_at or self._created_at

    # --- State machine --------------------------------------------------------

    def update_status(self, new_status: OrderStatus | str) -> None:
        """Move to ``new_status`` (an OrderStatus or its name).

        Only the terminal states are guarded; any other move is allowed,
        including skips such as PENDING -> DELIVERED and backward moves.
        """
        new_status = OrderStatus.parse(new_status)
        if self._status is OrderStatus.CANCELLED:
            raise InvalidTransitionError("cannot update a cancelled order")
        if self._status is OrderStatus.DELIVERED and new_status is not OrderStatus.CANCELLED:
            raise InvalidTransitionError("cannot update a delivered order")
        self._status = new_status
        self._updated_at = _now()

    # --- Accessors ------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def items(self) -> list[OrderItem]:
        """A fresh list on every call; mutating it does not touch the order."""
        return list(self._items)

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "customer_id": self._customer_id,
            "items": [item.to_dict() for item in self._items],
            "status": self._status.value,
            "total_amount": str(self._total_amount.amount),
            "created_at": self._created_at.isoformat(),
            "updated_at": self._updated_at.isoformat(),
        }

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id!r}, customer_id={self._customer_id!r}, "
            f"status={self._status.value}, total_amount={self._total_amount})"
        )

    @staticmethod
    def _calculate_total(items: tuple[OrderItem, ...]) -> Money:
        total = Money.zero(items[0].unit_price.currency)
        for item in items:
            total = total + item.subtotal
        return total
