"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from catalog.domain.exceptions import (
    EntityNotFoundError,
    RepositoryLoadError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):
    """Products read once from a JSON array and cached.

    The file is loaded eagerly in the constructor; a file that cannot be
    read or parsed makes construction fail with RepositoryLoadError.
    Callers receive copies of the cached products.

    Not-found policy: ``find_by_id`` raises EntityNotFoundError.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)
        self._products = self._load()

    # --- ProductRepository interface ------------------------------------------

    def find_all(self) -> list[Product]:
        return [p.copy() for p in self._products]

    def find_by_id(self, product_id: int) -> Product:
        for product in self._products:
            if product.id == product_id:
                return product.copy()
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise ValidationError(
                    f"expected a JSON array, got {type(raw).__name__}"
                )
            products = [self._to_domain(item) for item in raw]
        except (OSError, ValueError, ValidationError) as exc:
            logger.debug("Could not load products from %s: %s", self._file_path, exc)
            raise RepositoryLoadError(
                f"Could not load products from {self._file_path}: {exc}"
            ) from exc

        logger.debug("Loaded %d products from %s", len(products), self._file_path)
        return products

    @staticmethod
    def _to_domain(item: object) -> Product:
        if not isinstance(item, dict):
            raise ValidationError(f"expected a JSON object, got {type(item).__name__}")
        try:
            return Product(id=item["id"], name=item["name"], price=item["price"])
        except KeyError as exc:
            raise ValidationError(f"product entry is missing key {exc}") from exc
