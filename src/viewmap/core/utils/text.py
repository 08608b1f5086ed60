"""Tokenization for the full-text view.

The delimiter set is part of the index format: changing it changes the
token vocabulary of every index built with it.
"""

import re

TOKEN_DELIMITERS = " *#><\"',-"

_SPLIT_RE = re.compile(f"[{re.escape(TOKEN_DELIMITERS)}]+")


def tokenize(text: str) -> list[str]:
    """Split on runs of delimiters and lowercase each non-empty segment."""
    if not text:
        return []
    return [segment.lower() for segment in _SPLIT_RE.split(text) if segment]
