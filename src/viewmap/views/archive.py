"""Archive view: one chronologically sortable key per entry."""

from __future__ import annotations

from ..core.types import Emit
from ..core.utils.dates import parse_timestamp, timestamp_components
from .models import Entry, OtherDocument, parse_document


def archive(doc, emit: Emit) -> None:
    """Emit ``[year, month, day, hour, minute, second]`` of ``created-at`` in UTC.

    Every component is a zero-padded string, so lexicographic key order is
    chronological order.

    Raises:
        InvalidDateError: If ``created-at`` is missing or unparseable.
    """
    match parse_document(doc):
        case Entry(created_at=created_at):
            emit(timestamp_components(parse_timestamp(created_at)))
        case OtherDocument():
            return
