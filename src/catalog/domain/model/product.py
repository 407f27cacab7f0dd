"""Product entity.

Products are created by a repository when its data source is
initialised. The service layer never changes a repository's products;
it works on copies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from catalog.domain.exceptions import ValidationError

# Signed 64-bit range for IDs and prices.
MIN_VALUE = -(2**63)
MAX_VALUE = 2**63 - 1


@dataclass
class Product:
    """A product in the catalog.

    Mutable by construction but treated as immutable by convention:
    callers that need a different price take a copy first.
    """

    id: int
    name: str
    price: int

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it explicitly
        for field_name in ("id", "price"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError(
                    f"Product {field_name} must be an integer, "
                    f"got {type(value).__name__}"
                )
            if not MIN_VALUE <= value <= MAX_VALUE:
                raise ValidationError(
                    f"Product {field_name} is out of range, got {value}"
                )
        if not isinstance(self.name, str):
            raise ValidationError(
                f"Product name must be a string, got {type(self.name).__name__}"
            )

    def copy(self) -> Product:
        """Return a shallow copy of this product."""
        return replace(self)

    def with_price(self, price: int) -> Product:
        """Return a copy carrying ``price``; ``self`` is left untouched."""
        return replace(self, price=price)
