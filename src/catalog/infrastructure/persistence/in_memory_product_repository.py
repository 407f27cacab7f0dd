"""Static in-memory implementation of ProductRepository.

This is the primary data source: it is used whenever no other source
is requested.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """Fixed list of products seeded at construction.

    Callers receive copies, so the seed data cannot be changed through
    the returned products.

    Not-found policy: ``find_by_id`` returns None.
    """

    def __init__(self) -> None:
        self._data = [
            Product(id=1, name="RAM Memory", price=200),
            Product(id=2, name="Keyboard Razer Mini 60%", price=150),
            Product(id=3, name="CPU Intel Core i9", price=350),
            Product(id=4, name="MotherBoard Gigabyte", price=490),
        ]

    # --- ProductRepository interface ------------------------------------------

    def find_all(self) -> list[Product]:
        return [p.copy() for p in self._data]

    def find_by_id(self, product_id: int) -> Product | None:
        match = next((p for p in self._data if p.id == product_id), None)
        return match.copy() if match is not None else None
