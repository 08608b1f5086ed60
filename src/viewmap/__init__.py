"""viewmap: map functions for a document database's view engine."""

__version__ = "0.1.0"

from .core.exceptions import DocumentError, InvalidDateError, InvalidShapeError, ViewMapError
from .views import archive, collect, tags, text

__all__ = [
    "DocumentError",
    "InvalidDateError",
    "InvalidShapeError",
    "ViewMapError",
    "__version__",
    "archive",
    "collect",
    "tags",
    "text",
]
