"""ProductAvailability over the product service's REST API.

Talks to ``{base_url}/api/products/{id}``:

- ``GET`` returns ``{"id", "name", "price", "inStock", ...}`` or 404;
- ``PUT`` with ``{"inStock": n}`` sets the stock level; the product service
  treats the PUT body as a partial update, so other fields are left alone.

The product service routes only ``PUT /api/products/:id`` for writes; a
``PATCH`` to the same path is not routed there and fails.

The service only offers "set stock", so ``adjust_stock`` reads the current
level and writes the new one.  The two calls are not atomic: a concurrent
order for the same product can slip in between them.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from orderflow.domain.exceptions import ProductServiceError, ValidationError
from orderflow.domain.model.value_objects import Money
from orderflow.domain.service.product_availability import (
    ProductAvailability,
    ProductStock,
)

logger = logging.getLogger(__name__)


class HttpProductAvailability(ProductAvailability):

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout: float = 5.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def check(self, product_id: str) -> ProductStock | None:
        try:
            resp = self._client.get(self._product_url(product_id))
            if resp.status_code == httpx.codes.NOT_FOUND:
                return None
            resp.raise_for_status()
            return self._to_stock(resp)
        except httpx.HTTPError as exc:
            raise ProductServiceError(
                f"product service failed to look up product {product_id}: {exc}"
            ) from exc

    def adjust_stock(self, product_id: str, delta: int) -> bool:
        try:
            product = self.check(product_id)
        except ProductServiceError as exc:
            logger.error("Failed to update product stock: %s", exc)
            return False
        if product is None:
            return False

        new_stock = product.in_stock + delta
        if new_stock < 0:
            logger.warning(
                "Cannot reduce stock below zero for product %s (have %d, change %+d)",
                product_id,
                product.in_stock,
                delta,
            )
            return False

        try:
            resp = self._client.put(
                self._product_url(product_id), json={"inStock": new_stock}
            )
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Failed to update product stock for %s: %s", product_id, exc)
            return False
        return True

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpProductAvailability:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _product_url(self, product_id: str) -> str:
        return f"{self._base_url}/api/products/{product_id}"

    @staticmethod
    def _to_stock(resp: httpx.Response) -> ProductStock:
        try:
            data: dict[str, Any] = resp.json()
            return ProductStock(
                id=str(data.get("id") or data["_id"]),
                name=data["name"],
                in_stock=int(data["inStock"]),
                price=Money.of(data["price"]),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise ProductServiceError(
                f"product service returned an unexpected payload: {resp.text!r}"
            ) from exc
