"""CLI commands for querying products."""

from __future__ import annotations

import json

import click

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_service

_SOURCE_OPTION = click.option(
    "--source",
    default=None,
    help="Data source name (see 'catalog sources'). Defaults to the primary one.",
)
_JSON_OPTION = click.option("--json", "as_json", is_flag=True, help="Print JSON.")


@click.command("list")
@_SOURCE_OPTION
@_JSON_OPTION
def product_list(source: str | None, as_json: bool) -> None:
    """List all products, tax included."""
    try:
        service = product_service(source)
        products = [ProductDTO.from_domain(p) for p in service.find_all()]
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps([p.to_dict() for p in products], indent=2))
        return

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'Price':>10}")
    click.echo("-" * 46)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<28} {p.price:>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@_SOURCE_OPTION
@_JSON_OPTION
def product_show(product_id: int, source: str | None, as_json: bool) -> None:
    """Show a single product, without tax."""
    try:
        product = product_service(source).find_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    dto = ProductDTO.from_domain(product)
    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2))
        return

    click.echo(f"Product #{dto.id} '{dto.name}' at {dto.price}")
