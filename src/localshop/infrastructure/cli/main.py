import click

from localshop.infrastructure.cli.serve_commands import serve
from localshop.infrastructure.cli.shop_commands import shop
from localshop.utils.logging import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """LocalShop — a small flat-file shop"""
    configure_logging(verbose)


# Register subcommands
cli.add_command(serve)
cli.add_command(shop)
