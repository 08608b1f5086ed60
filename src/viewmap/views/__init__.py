"""Map functions for the document view engine.

Each view takes a document and an ``emit`` callback and emits zero or more
index keys. Only ``entry`` documents produce keys.
"""

from .archive import archive
from .models import DocumentKind, Entry, OtherDocument, parse_document
from .registry import ViewRegistry
from .runner import ErrorPolicy, Row, RunStats, ViewRunner, collect
from .tags import tags
from .text import text

__all__ = [
    "DocumentKind",
    "Entry",
    "ErrorPolicy",
    "OtherDocument",
    "Row",
    "RunStats",
    "ViewRegistry",
    "ViewRunner",
    "archive",
    "collect",
    "parse_document",
    "tags",
    "text",
]
