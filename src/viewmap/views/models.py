"""Tagged document variants.

Raw documents are plain mappings discriminated by their ``type`` field.
``parse_document`` turns one into an ``Entry`` or an ``OtherDocument`` so the
views can dispatch exhaustively on the variant instead of probing fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar

from ..core.exceptions import InvalidShapeError
from ..core.types import RawDocument

ENTRY_TYPE = "entry"


class DocumentKind(StrEnum):
    """Document variants the views distinguish."""

    ENTRY = "entry"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """A user-authored record with a creation time, tags and a text body.

    Field values are kept as found in the raw document (``None`` when absent);
    each view validates only the field it reads.
    """

    kind: ClassVar[DocumentKind] = DocumentKind.ENTRY

    created_at: Any = None
    tags: Any = None
    text: Any = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class OtherDocument:
    """Any document that is not an entry. Views emit nothing for it."""

    kind: ClassVar[DocumentKind] = DocumentKind.OTHER

    type: Any = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)


Document = Entry | OtherDocument


def parse_document(raw: RawDocument | Document) -> Document:
    """Classify a raw document by its ``type`` field.

    Already-parsed variants are returned unchanged.

    Raises:
        InvalidShapeError: If *raw* is not a mapping.
    """
    if isinstance(raw, Entry | OtherDocument):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidShapeError(f"document must be a mapping, got {type(raw).__name__}")

    if raw.get("type") == ENTRY_TYPE:
        return Entry(
            created_at=raw.get("created-at"),
            tags=raw.get("tags"),
            text=raw.get("text"),
            raw=raw,
        )
    return OtherDocument(type=raw.get("type"), raw=raw)
