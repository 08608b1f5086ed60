"""
viewmap exception hierarchy.

All viewmap exceptions inherit from ViewMapError. Per-document failures
inherit from DocumentError so an indexing driver can skip one bad document
without catching configuration or lookup errors by accident.
"""


class ViewMapError(Exception):
    """Base exception class for all viewmap errors."""


class ConfigurationError(ViewMapError):
    """Raised for configuration errors (missing keys, invalid values)."""


class UnknownViewError(ViewMapError, KeyError):
    """Raised when a view name is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DocumentError(ViewMapError):
    """Raised when a single document cannot be mapped.

    Attributes:
        doc_id: Identifier of the failing document, when the caller knows it.
    """

    def __init__(self, message: str, doc_id=None):
        super().__init__(message)
        self.doc_id = doc_id


class InvalidDateError(DocumentError):
    """Raised when ``created-at`` is missing, not a string, or not a timestamp."""


class InvalidShapeError(DocumentError):
    """Raised when a field has the wrong shape (non-sequence tags, non-string text)."""
