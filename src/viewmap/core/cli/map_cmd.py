"""viewmap map: run one view over a file of documents."""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any, TextIO

import click

from viewmap.core.utils.logging import LOG_LEVELS


def _read_documents(stream: TextIO) -> Iterator[tuple[Any, Any]]:
    """Yield ``(doc_id, document)`` from a JSON array or JSON Lines stream.

    The id is the document's ``_id`` when present, else its position.
    """
    content = stream.read()
    stripped = content.lstrip()
    if not stripped:
        return

    if stripped.startswith("["):
        try:
            documents = json.loads(content)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"Invalid JSON input: {e}") from e
    else:
        documents = []
        for lineno, line in enumerate(content.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                documents.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise click.ClickException(f"Invalid JSON on line {lineno}: {e}") from e

    for position, doc in enumerate(documents):
        doc_id = doc.get("_id", position) if isinstance(doc, dict) else position
        yield doc_id, doc


@click.command("map")
@click.argument("view_name", metavar="VIEW")
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--on-error",
    type=click.Choice(["skip", "abort"], case_sensitive=False),
    default=None,
    help="Skip failing documents or stop at the first one (default from config).",
)
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="YAML or JSON config file.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
def map_documents(
    view_name: str,
    source: TextIO,
    on_error: str | None,
    config_file: str | None,
    log_level: str | None,
) -> None:
    """Run VIEW over documents in SOURCE (JSON array or JSON Lines, default stdin).

    Prints one JSON object per emitted key: {"id": ..., "key": ...}.
    """
    from viewmap.core.cli.common import build_registry, load_config
    from viewmap.core.exceptions import DocumentError, UnknownViewError
    from viewmap.core.utils.logging import configure_logging
    from viewmap.views.runner import ViewRunner

    settings = load_config(config_file)
    configure_logging(settings, level=log_level)

    try:
        runner = ViewRunner(
            view_name,
            on_error=on_error or settings.views.on_error,
            registry=build_registry(settings),
        )
    except UnknownViewError as e:
        raise click.BadParameter(str(e), param_hint="VIEW") from e

    try:
        for row in runner.run(_read_documents(source)):
            click.echo(json.dumps({"id": row.doc_id, "key": row.key}))
    except DocumentError as e:
        raise click.ClickException(f"Document {e.doc_id!r}: {e}") from e

    if runner.stats.failed:
        click.echo(f"{runner.stats.failed} document(s) skipped", err=True)
