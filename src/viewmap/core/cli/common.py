"""Shared setup logic for CLI commands."""

from __future__ import annotations

import click


def load_config(config_file: str | None = None):
    """Load and validate config, turning config errors into click errors."""
    from viewmap.core.config import Config
    from viewmap.core.exceptions import ConfigurationError

    try:
        return Config(config_file=config_file).validated()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e


def build_registry(settings):
    """Create a ViewRegistry, discovering plugin views when enabled."""
    from viewmap.views.registry import ViewRegistry

    registry = ViewRegistry()
    if settings.views.plugins:
        registry.discover()
    return registry
