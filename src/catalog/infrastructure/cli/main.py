import logging

import click

from catalog.infrastructure.cli.product_commands import product_list, product_show
from catalog.infrastructure.cli.source_commands import sources


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Catalog — products behind swappable data sources"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Query products."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_show)
cli.add_command(sources)
