"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shopcart.application.dto import ProductDTO
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.session import ShoppingSession
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import create_session
from shopcart.infrastructure.config import Settings


def open_session(settings: Settings) -> ShoppingSession:
    try:
        return create_session(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def echo_products(products: list[ProductDTO]) -> None:
    """Shared formatting for a list of products."""
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<20} {'Price':>12} {'In stock':>9}  Available")
    click.echo("-" * 54)
    for p in products:
        click.echo(
            f"{p.name:<20} {p.price:>12} {p.available_count:>9}  {'yes' if p.available else 'no'}"
        )


@click.command("products")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    session = open_session(settings)
    echo_products(ListProductsHandler(session).handle())
