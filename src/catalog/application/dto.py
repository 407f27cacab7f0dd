"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data from the application layer to the CLI without exposing
domain entities to the outside world.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    price: int

    @classmethod
    def from_domain(cls, product: Product) -> ProductDTO:
        return cls(id=product.id, name=product.name, price=product.price)

    def to_dict(self) -> dict:
        return asdict(self)
