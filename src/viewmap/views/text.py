"""Text view: lowercase word tokens for a full-text index."""

from __future__ import annotations

from ..core.exceptions import InvalidShapeError
from ..core.types import Emit
from ..core.utils.text import tokenize
from .models import Entry, OtherDocument, parse_document


def text(doc, emit: Emit) -> None:
    """Emit each token of the entry's ``text``; see ``tokenize``.

    Raises:
        InvalidShapeError: If ``text`` is present but not a string.
    """
    match parse_document(doc):
        case Entry(text=None):
            return
        case Entry(text=str() as body):
            for token in tokenize(body):
                emit(token)
        case Entry(text=value):
            raise InvalidShapeError(f"text must be a string, got {type(value).__name__}")
        case OtherDocument():
            return
