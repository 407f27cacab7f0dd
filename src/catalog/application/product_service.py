"""Application service: product queries with tax applied to listings."""

from __future__ import annotations

import logging
import math

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.application.settings import Settings

logger = logging.getLogger(__name__)


class ProductService:
    """Read-only product queries over whichever repository it is given.

    The repository is chosen by the caller (see the composition root);
    the service only depends on the abstract interface.
    """

    def __init__(self, repository: ProductRepository, settings: Settings) -> None:
        self._repository = repository
        self._tax_rate = settings.tax_rate

    def find_all(self) -> list[Product]:
        """Return every product with its price multiplied by the tax rate.

        Prices are truncated to an integer, not rounded. The repository's
        own products are copied, never modified.
        """
        products = [
            p.with_price(self._apply_tax(p.price))
            for p in self._repository.find_all()
        ]
        logger.debug("Applied tax rate %s to %d products", self._tax_rate, len(products))
        return products

    def find_by_id(self, product_id: int) -> Product | None:
        """Return the repository's product as-is, without tax.

        Not-found handling is whatever the repository does: it may return
        None or raise EntityNotFoundError.
        """
        return self._repository.find_by_id(product_id)

    def _apply_tax(self, price: int) -> int:
        taxed = price * self._tax_rate
        if not math.isfinite(taxed):
            raise ValidationError(
                f"Price {price} with tax rate {self._tax_rate} is out of range"
            )
        return int(taxed)
