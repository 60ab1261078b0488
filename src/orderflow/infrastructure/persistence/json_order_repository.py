"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.model.order import Order
from orderflow.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def find_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def find_by_customer(self, customer_id: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["customer_id"] == customer_id
        ]

    def find_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, order: Order) -> Order:
        orders = [raw for raw in self._load_raw() if raw["id"] != order.id]
        orders.append(self._to_raw(order))
        self._persist_raw(orders)
        return self._to_domain(orders[-1])

    def update(self, order: Order) -> Order:
        orders = self._load_raw()
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                self._persist_raw(orders)
                return self._to_domain(orders[i])
        raise EntityNotFoundError(f"order {order.id} not found")

    def delete(self, order_id: str) -> bool:
        orders = self._load_raw()
        remaining = [raw for raw in orders if raw["id"] != order_id]
        if len(remaining) == len(orders):
            return False
        self._persist_raw(remaining)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return order.to_dict()

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        # total_amount is stored for readers of the file; the aggregate
        # recomputes it from the items.
        return Order(
            customer_id=raw["customer_id"],
            items=raw["items"],
            order_id=raw["id"],
            status=raw["status"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
