"""Tags view: one key per tag, for a tag -> document index."""

from __future__ import annotations

from typing import Any

from ..core.exceptions import InvalidShapeError
from ..core.types import Emit
from .models import Entry, OtherDocument, parse_document

_SCALAR_TYPES = (str, int, float, bool, type(None))


def _check_tags(value: Any) -> list | tuple:
    if not isinstance(value, list | tuple):
        raise InvalidShapeError(f"tags must be a list, got {type(value).__name__}")
    for position, tag in enumerate(value):
        if not isinstance(tag, _SCALAR_TYPES):
            raise InvalidShapeError(f"tag at position {position} is not a scalar: {type(tag).__name__}")
    return value


def tags(doc, emit: Emit) -> None:
    """Emit every tag of an entry unchanged, in order, duplicates included.

    Raises:
        InvalidShapeError: If ``tags`` is present but not a list of scalars.
    """
    match parse_document(doc):
        case Entry(tags=None):
            return
        case Entry(tags=value):
            for tag in _check_tags(value):
                emit(tag)
        case OtherDocument():
            return
