import click

from shop.infrastructure import bootstrap
from shop.infrastructure.cli.menu import Menu


@click.command()
def cli() -> None:
    """Interactive order management console."""
    bootstrap.configure_logging()
    Menu(bootstrap.shop()).run()
