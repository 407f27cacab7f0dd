"""Settings consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PRIMARY_SOURCE = "list"


@dataclass(frozen=True)
class Settings:
    """Explicit configuration handed to services at construction."""

    tax_rate: float
    default_source: str = DEFAULT_PRIMARY_SOURCE
