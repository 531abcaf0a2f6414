import logging

import click

from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.cli.product_commands import product_list
from shopcart.infrastructure.cli.shop_commands import shop
from shopcart.infrastructure.config import LOG_LEVELS, Settings


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (overrides SHOPCART_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Shopcart: in-memory shopping cart with discounts."""
    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


# Register subcommands
cli.add_command(product_list)
cli.add_command(shop)
