"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions: the service receives
whichever repository is built here.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from catalog.application.product_service import ProductService
from catalog.application.settings import Settings
from catalog.domain.exceptions import ConfigurationError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.config import load_settings
from catalog.infrastructure.persistence.fallback_product_repository import (
    FallbackProductRepository,
)
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = logging.getLogger(__name__)

# Bundled defaults ship inside the package so they are found in any install.
_RESOURCES_DIR = Path(__file__).resolve().parents[1] / "resources"


def data_file() -> Path:
    default = _RESOURCES_DIR / "products.json"
    return Path(os.environ.get("CATALOG_DATA_FILE", default))


def config_file() -> Path:
    default = _RESOURCES_DIR / "config.properties"
    return Path(os.environ.get("CATALOG_CONFIG_FILE", default))


# Name -> factory. The JSON source is only built (and its file read) on demand.
_SOURCES: dict[str, Callable[[], ProductRepository]] = {
    "list": InMemoryProductRepository,
    "foo": FallbackProductRepository,
    "json": lambda: JsonProductRepository(data_file()),
}


def source_names() -> list[str]:
    return list(_SOURCES)


def settings() -> Settings:
    return load_settings(config_file())


def product_repository(
    source: str | None = None, app_settings: Settings | None = None
) -> ProductRepository:
    """Build the named repository, or the configured primary one."""
    if source is None:
        source = (app_settings or settings()).default_source

    factory = _SOURCES.get(source)
    if factory is None:
        raise ConfigurationError(
            f"Unknown product source '{source}' "
            f"(expected one of: {', '.join(_SOURCES)})"
        )

    logger.debug("Using product source '%s'", source)
    return factory()


def product_service(source: str | None = None) -> ProductService:
    app_settings = settings()
    return ProductService(
        repository=product_repository(source, app_settings),
        settings=app_settings,
    )
