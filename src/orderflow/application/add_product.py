"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money
from orderflow.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(
        self,
        name: str,
        price: str | float | int | Decimal,
        in_stock: int = 0,
        description: str = "",
        category: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        product = Product(
            name=name.strip() if isinstance(name, str) else name,
            price=Money.of(price),
            in_stock=in_stock,
            description=description,
            category=category,
        )
        self._product_repo.save(product)
        return product
