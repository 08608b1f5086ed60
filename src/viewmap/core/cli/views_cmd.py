"""viewmap views: list registered views."""

from __future__ import annotations

import click


@click.command()
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="YAML or JSON config file.")
def views(config_file: str | None) -> None:
    """List the available view names."""
    from viewmap.core.cli.common import build_registry, load_config

    settings = load_config(config_file)
    for name in build_registry(settings).list_names():
        click.echo(name)
