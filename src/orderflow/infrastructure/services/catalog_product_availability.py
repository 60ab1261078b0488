"""ProductAvailability backed directly by a ProductRepository.

Used when the catalog lives in the same process as the orders, e.g. the
CLI working on local JSON files.
"""

from __future__ import annotations

import logging

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.repository.product_repository import ProductRepository
from orderflow.domain.service.product_availability import (
    ProductAvailability,
    ProductStock,
)

logger = logging.getLogger(__name__)


class CatalogProductAvailability(ProductAvailability):

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def check(self, product_id: str) -> ProductStock | None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return None
        return ProductStock(
            id=product.id,
            name=product.name,
            in_stock=product.in_stock,
            price=product.price,
        )

    def adjust_stock(self, product_id: str, delta: int) -> bool:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return False
        try:
            product.adjust_stock(delta)
        except ValidationError as exc:
            logger.debug("Refused stock change %+d for %s: %s", delta, product_id, exc)
            return False
        self._product_repo.save(product)
        return True
