"""viewmap CLI: entry point for the map and views commands."""

import click

from viewmap import __version__


@click.group()
@click.version_option(version=__version__, package_name="viewmap")
def main() -> None:
    """Run document views from the command line."""


# Register subcommands
from .map_cmd import map_documents
from .views_cmd import views

main.add_command(map_documents)
main.add_command(views)
