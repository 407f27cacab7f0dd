"""CLI command listing the registered data sources."""

from __future__ import annotations

import click

from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import settings, source_names


@click.command("sources")
def sources() -> None:
    """List the available product data sources."""
    try:
        primary = settings().default_source
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for name in source_names():
        marker = " (primary)" if name == primary else ""
        click.echo(f"{name}{marker}")
