"""Application service: Update Product use case."""

from __future__ import annotations

from orderflow.domain.model.product import Product, ProductPatch
from orderflow.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, product_id: str, patch: ProductPatch) -> Product | None:
        """Apply a partial update to a product.

        Existing orders are unaffected: they carry their own copy of the
        unit price.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return None

        product.apply_patch(patch)
        self._product_repo.save(product)
        return product
