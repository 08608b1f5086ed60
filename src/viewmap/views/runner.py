"""Drive a view over documents the way an indexing engine would.

``collect`` runs one view on one document. ``ViewRunner`` runs a view over a
batch of ``(doc_id, document)`` pairs and applies the per-document error
policy: skip-and-log, or abort the batch. Storing, sorting and querying the
resulting rows is left to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, NamedTuple

from loguru import logger

from ..core.exceptions import DocumentError
from ..core.types import Key
from .models import Entry, parse_document
from .registry import View, ViewRegistry


class ErrorPolicy(StrEnum):
    """What to do when a document fails to map."""

    SKIP = "skip"
    ABORT = "abort"


class Row(NamedTuple):
    """One emission attributed to its document."""

    doc_id: Any
    key: Key


@dataclass
class RunStats:
    """Counters for a ``ViewRunner`` pass.

    Attributes:
        documents: Documents seen.
        emitted: Rows yielded.
        skipped: Non-entry documents (no emission, not an error).
        failed: Documents dropped by the skip policy.
    """

    documents: int = 0
    emitted: int = 0
    skipped: int = 0
    failed: int = 0


def collect(view: View, doc) -> list[Key]:
    """Run *view* on one document and return its keys in emission order."""
    keys: list[Key] = []
    view(doc, keys.append)
    return keys


class ViewRunner:
    """Apply one view to many documents.

    Emissions are buffered per document, so a document that fails part-way
    contributes no rows at all.

    Example::

        runner = ViewRunner("tags")
        rows = list(runner.run([("a", {"type": "entry", "tags": ["x"]})]))
        # [Row(doc_id='a', key='x')]
    """

    def __init__(
        self,
        view: View | str,
        on_error: ErrorPolicy | str = ErrorPolicy.SKIP,
        registry: ViewRegistry | None = None,
    ):
        if isinstance(view, str):
            self.name = view
            self.view = (registry or ViewRegistry()).resolve(view)
        else:
            self.name = getattr(view, "__name__", repr(view))
            self.view = view
        self.on_error = ErrorPolicy(on_error)
        self.stats = RunStats()

    def run(self, documents: Iterable[tuple[Any, Any]]) -> Iterator[Row]:
        """Yield ``Row(doc_id, key)`` for every emission, document by document.

        Raises:
            DocumentError: On the first failing document when the policy is ``abort``.
        """
        self.stats = RunStats()
        for doc_id, raw in documents:
            self.stats.documents += 1
            try:
                doc = parse_document(raw)
                # Views get the raw mapping: plugin views are written against plain documents
                keys = collect(self.view, raw)
            except DocumentError as e:
                e.doc_id = doc_id
                if self.on_error is ErrorPolicy.ABORT:
                    raise
                self.stats.failed += 1
                logger.warning(f"View '{self.name}' skipped document {doc_id!r}: {e}")
                continue

            if not isinstance(doc, Entry):
                self.stats.skipped += 1
            for key in keys:
                self.stats.emitted += 1
                yield Row(doc_id, key)

        logger.debug(
            f"View '{self.name}': {self.stats.documents} documents, {self.stats.emitted} rows, "
            f"{self.stats.failed} failed"
        )
