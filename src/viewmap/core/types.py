"""Shared type aliases used across viewmap."""

from collections.abc import Callable, Mapping
from typing import Any

# A decoded JSON document as handed over by the engine
RawDocument = Mapping[str, Any]

# View types
Key = Any
Emit = Callable[[Key], None]
