"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete data sources (in-memory list, constant
fallback, JSON file) live in the infrastructure layer.

The not-found policy is NOT uniform across implementations; each one
documents what ``find_by_id`` does when nothing matches.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in the data source, in its natural order."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return the first product with the given ID.

        What happens when no product matches depends on the implementation.
        """
