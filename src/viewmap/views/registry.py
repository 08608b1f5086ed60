"""
View registry.

Holds the built-in views and discovers extra ones at runtime via
``importlib.metadata`` entry points (group: ``viewmap.views``). Third-party
packages can register map functions in their own ``pyproject.toml``:

    [project.entry-points."viewmap.views"]
    by_author = "my_package.views:by_author"
"""

from collections.abc import Callable
from importlib.metadata import entry_points

from loguru import logger

from ..core.exceptions import UnknownViewError
from .archive import archive
from .tags import tags
from .text import text

ENTRY_POINT_GROUP = "viewmap.views"

View = Callable

BUILTIN_VIEWS: dict[str, View] = {
    "archive": archive,
    "tags": tags,
    "text": text,
}


class ViewRegistry:
    """Name -> map function lookup, seeded with the built-in views."""

    def __init__(self, builtins: bool = True):
        self._views: dict[str, View] = dict(BUILTIN_VIEWS) if builtins else {}

    def discover(self) -> dict[str, View]:
        """Scan entry points and return {name: view} for everything registered."""
        for ep in entry_points(group=ENTRY_POINT_GROUP):
            try:
                view = ep.load()
            except Exception as e:
                logger.warning(f"Failed to load view '{ep.name}': {e}")
                continue
            if not callable(view):
                logger.warning(f"Entry point '{ep.name}' is not callable, skipping")
                continue
            if ep.name in self._views:
                logger.debug(f"View '{ep.name}' overridden by entry point {ep.value}")
            self._views[ep.name] = view
            logger.debug(f"Discovered view: {ep.name}")

        return dict(self._views)

    def register(self, name: str, view: View) -> None:
        """Manually register a view (useful for testing)."""
        if not callable(view):
            raise TypeError(f"View '{name}' must be callable")
        self._views[name] = view

    def get(self, name: str) -> View | None:
        """Get a registered view by name."""
        return self._views.get(name)

    def list_names(self) -> list[str]:
        return sorted(self._views)

    def resolve(self, name: str) -> View:
        """Get a registered view by name, raising if it is unknown."""
        view = self._views.get(name)
        if view is None:
            raise UnknownViewError(f"No view registered as '{name}'. Available: {self.list_names()}")
        return view

    def __contains__(self, name: object) -> bool:
        return name in self._views
