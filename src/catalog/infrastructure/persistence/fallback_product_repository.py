"""Constant single-product implementation of ProductRepository."""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

FALLBACK_NAME = "Monitor Asus 27"
FALLBACK_PRICE = 600


class FallbackProductRepository(ProductRepository):
    """Always answers, whatever the ID.

    Not-found policy: none. ``find_by_id`` synthesizes a product carrying
    the requested ID, so it never returns None and never raises.
    """

    def find_all(self) -> list[Product]:
        return [Product(id=1, name=FALLBACK_NAME, price=FALLBACK_PRICE)]

    def find_by_id(self, product_id: int) -> Product | None:
        return Product(id=product_id, name=FALLBACK_NAME, price=FALLBACK_PRICE)
