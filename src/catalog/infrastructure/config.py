"""Loads Settings from ``config.properties``.

The file holds ``key=value`` lines; environment variables override
individual values. Fails fast with a clear error if required
configuration is missing.
"""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path

from dotenv import dotenv_values

from catalog.application.settings import DEFAULT_PRIMARY_SOURCE, Settings
from catalog.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

TAX_KEY = "config.price.tax"
TAX_ENV = "CATALOG_PRICE_TAX"
PRIMARY_SOURCE_KEY = "config.repository.primary"


def load_settings(path: Path) -> Settings:
    """Read settings from a properties file, applying env overrides."""
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}")

    values = dotenv_values(path)

    raw_tax = os.environ.get(TAX_ENV) or values.get(TAX_KEY)
    if not raw_tax:
        raise ConfigurationError(
            f"Required property '{TAX_KEY}' is not set in {path} "
            f"(or via the {TAX_ENV} environment variable); "
            f"properties must be written as '{TAX_KEY}=<value>', "
            f"the 'key: value' and 'key value' forms are not read"
        )

    settings = Settings(
        tax_rate=_parse_tax_rate(raw_tax),
        default_source=values.get(PRIMARY_SOURCE_KEY) or DEFAULT_PRIMARY_SOURCE,
    )
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings


def _parse_tax_rate(raw: str) -> float:
    try:
        rate = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"Property '{TAX_KEY}' must be a number, got {raw!r}"
        ) from exc
    if not math.isfinite(rate) or rate < 0:
        raise ConfigurationError(
            f"Property '{TAX_KEY}' must be a finite non-negative number, got {raw!r}"
        )
    return rate
