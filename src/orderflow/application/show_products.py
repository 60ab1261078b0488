"""Application service: single-product lookup and removal."""

from __future__ import annotations

import logging

from orderflow.domain.model.product import Product
from orderflow.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, product_id: str) -> Product | None:
        return self._product_repo.get_by_id(product_id)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, product_id: str) -> bool:
        """Remove a product from the catalog.

        Orders that already reference it keep their own copy of its name
        and unit price, so nothing else is touched.
        """
        deleted = self._product_repo.delete(product_id)
        if deleted:
            logger.info("Product %s deleted", product_id)
        return deleted
