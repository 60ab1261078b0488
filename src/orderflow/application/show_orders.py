"""Application service: order queries."""

from __future__ import annotations

from orderflow.domain.model.order import Order
from orderflow.domain.repository.order_repository import OrderRepository


class GetOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def execute(self, order_id: str) -> Order | None:
        return self._order_repo.find_by_id(order_id)


class GetOrdersByCustomerHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def execute(self, customer_id: str) -> list[Order]:
        return self._order_repo.find_by_customer(customer_id)


class GetAllOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def execute(self) -> list[Order]:
        return self._order_repo.find_all()
