"""Product aggregate.

Products live independently of orders. Orders only ever see a product
through the ProductAvailability collaborator: its id, name, price and how
many units are in stock.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.order import new_id
from orderflow.domain.model.value_objects import Money


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProductPatch:
    """A partial update: ``None`` means "leave this field alone"."""

    name: str | None = None
    description: str | None = None
    price: Money | None = None
    category: str | None = None
    in_stock: int | None = None

    def changes(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``name`` is never blank
    - ``price`` is strictly positive
    - ``in_stock`` is never negative
    """

    name: str
    price: Money
    in_stock: int = 0
    description: str = ""
    category: str = ""
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self._validate(self.name, self.price, self.in_stock)
        if self.updated_at is None:
            self.updated_at = self.created_at

    def adjust_stock(self, delta: int) -> None:
        """Add ``delta`` units (negative to take stock out)."""
        new_stock = self.in_stock + delta
        if new_stock < 0:
            raise ValidationError("cannot reduce stock below zero")
        self.in_stock = new_stock
        self.updated_at = _now()

    def apply_patch(self, patch: ProductPatch) -> None:
        """Apply every field present in ``patch``, all or nothing.

        The merged values go through the same checks as construction
        before anything on the product is changed.
        """
        changes = patch.changes()
        if not changes:
            return
        self._validate(
            changes.get("name", self.name),
            changes.get("price", self.price),
            changes.get("in_stock", self.in_stock),
        )
        for name, value in changes.items():
            setattr(self, name, value)
        self.updated_at = _now()

    @staticmethod
    def _validate(name: str, price: Money, in_stock: int) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("product name cannot be empty")
        if not price.is_positive():
            raise ValidationError("product price must be greater than zero")
        if isinstance(in_stock, bool) or not isinstance(in_stock, int):
            raise ValidationError("stock quantity must be an integer")
        if in_stock < 0:
            raise ValidationError("stock quantity cannot be negative")
