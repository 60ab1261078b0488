"""The order side's view of the product catalog.

The catalog may live in another process; every call here can be a
network round trip.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from orderflow.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductStock:
    id: str
    name: str
    in_stock: int
    price: Money


class ProductAvailability(ABC):

    @abstractmethod
    def check(self, product_id: str) -> ProductStock | None:
        """Return the product's current stock and price, or None if unknown."""

    @abstractmethod
    def adjust_stock(self, product_id: str, delta: int) -> bool:
        """Add ``delta`` units to the product's stock.

        A negative delta reserves, a positive one restores. Returns False,
        without raising, when the product no longer exists or the stock
        would drop below zero.
        """
