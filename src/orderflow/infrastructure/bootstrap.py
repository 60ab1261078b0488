"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from orderflow.domain.service.product_availability import ProductAvailability
from orderflow.infrastructure.config import Settings
from orderflow.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderflow.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from orderflow.infrastructure.services.catalog_product_availability import (
    CatalogProductAvailability,
)
from orderflow.infrastructure.services.http_product_availability import (
    HttpProductAvailability,
)

logger = logging.getLogger(__name__)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


@contextmanager
def product_availability(settings: Settings) -> Iterator[ProductAvailability]:
    """Remote product service when one is configured, local catalog otherwise.

    The HTTP adapter's client is closed when the block exits.
    """
    if settings.product_service_url:
        logger.debug("Using product service at %s", settings.product_service_url)
        with HttpProductAvailability(
            settings.product_service_url, timeout=settings.product_service_timeout
        ) as remote:
            yield remote
    else:
        yield CatalogProductAvailability(product_repository(settings))
