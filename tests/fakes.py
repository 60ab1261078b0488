"""In-memory fakes for testing.

The repositories implement the same abstract interfaces as the JSON
repositories but keep everything in a dict. FakeProductAvailability also
records every call so tests can assert on the saga's side effects.
"""

from __future__ import annotations

from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.model.order import Order
from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.repository.product_repository import ProductRepository
from orderflow.domain.service.product_availability import (
    ProductAvailability,
    ProductStock,
)


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[str, Order] = {}
        for o in orders or []:
            self._store[o.id] = o
        self.saved: list[str] = []
        self.updated: list[str] = []

    def find_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def find_by_customer(self, customer_id: str) -> list[Order]:
        return [o for o in self._store.values() if o.customer_id == customer_id]

    def find_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> Order:
        self._store[order.id] = order
        self.saved.append(order.id)
        return order

    def update(self, order: Order) -> Order:
        if order.id not in self._store:
            raise EntityNotFoundError(f"order {order.id} not found")
        self._store[order.id] = order
        self.updated.append(order.id)
        return order

    def delete(self, order_id: str) -> bool:
        return self._store.pop(order_id, None) is not None


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> bool:
        return self._store.pop(product_id, None) is not None


class FakeProductAvailability(ProductAvailability):
    """A catalog of ``product_id -> (name, in_stock, price)``.

    ``adjust_stock`` applies the delta like the real service would, unless
    the product id is listed in ``failing``.
    """

    def __init__(
        self,
        stock: dict[str, tuple[str, int, str]] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self._stock = dict(stock or {})
        self._failing = failing or set()
        self.checks: list[str] = []
        self.adjustments: list[tuple[str, int]] = []

    def check(self, product_id: str) -> ProductStock | None:
        self.checks.append(product_id)
        entry = self._stock.get(product_id)
        if entry is None:
            return None
        name, in_stock, price = entry
        return ProductStock(id=product_id, name=name, in_stock=in_stock, price=Money.of(price))

    def adjust_stock(self, product_id: str, delta: int) -> bool:
        self.adjustments.append((product_id, delta))
        entry = self._stock.get(product_id)
        if entry is None or product_id in self._failing:
            return False
        name, in_stock, price = entry
        if in_stock + delta < 0:
            return False
        self._stock[product_id] = (name, in_stock + delta, price)
        return True

    def in_stock(self, product_id: str) -> int:
        return self._stock[product_id][1]
