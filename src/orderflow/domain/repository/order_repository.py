"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def find_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def find_by_customer(self, customer_id: str) -> list[Order]:
        """Return every order placed by a customer, oldest first."""

    @abstractmethod
    def find_all(self) -> list[Order]:
        """Return every order, oldest first."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist a new order and return the stored aggregate."""

    @abstractmethod
    def update(self, order: Order) -> Order:
        """Overwrite an existing order.

        Raises EntityNotFoundError if no order with that ID is stored.
        """

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove an order; False if there was nothing to remove."""
