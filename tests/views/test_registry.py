"""Tests for viewmap.views.registry."""

from unittest.mock import MagicMock, patch

import pytest

from viewmap.core.exceptions import UnknownViewError
from viewmap.views import archive, tags, text
from viewmap.views.registry import ENTRY_POINT_GROUP, ViewRegistry


def _by_author(doc, emit):
    if doc.get("type") == "entry":
        emit(doc.get("author"))


class TestViewRegistry:
    def test_builtins(self):
        registry = ViewRegistry()
        assert registry.list_names() == ["archive", "tags", "text"]
        assert registry.get("archive") is archive
        assert registry.get("tags") is tags
        assert registry.get("text") is text

    def test_empty(self):
        assert ViewRegistry(builtins=False).list_names() == []

    def test_register(self):
        registry = ViewRegistry()
        registry.register("by_author", _by_author)
        assert "by_author" in registry
        assert registry.resolve("by_author") is _by_author

    def test_register_not_callable(self):
        with pytest.raises(TypeError):
            ViewRegistry().register("bad", "not a function")

    def test_get_unknown(self):
        assert ViewRegistry().get("nope") is None

    def test_resolve_unknown(self):
        with pytest.raises(UnknownViewError, match="Available"):
            ViewRegistry().resolve("nope")


class TestDiscover:
    def _entry_point(self, name, loaded=None, error=None):
        ep = MagicMock()
        ep.name = name
        ep.value = f"plugin.views:{name}"
        if error:
            ep.load.side_effect = error
        else:
            ep.load.return_value = loaded
        return ep

    def test_discovers_plugins(self):
        eps = [self._entry_point("by_author", _by_author)]
        with patch("viewmap.views.registry.entry_points", return_value=eps) as mock_eps:
            found = ViewRegistry().discover()
        mock_eps.assert_called_once_with(group=ENTRY_POINT_GROUP)
        assert found["by_author"] is _by_author
        assert "archive" in found

    def test_load_failure_skipped(self):
        eps = [self._entry_point("broken", error=ImportError("no module")), self._entry_point("ok", _by_author)]
        with patch("viewmap.views.registry.entry_points", return_value=eps):
            found = ViewRegistry().discover()
        assert "broken" not in found
        assert "ok" in found

    def test_non_callable_skipped(self):
        eps = [self._entry_point("constant", 42)]
        with patch("viewmap.views.registry.entry_points", return_value=eps):
            found = ViewRegistry().discover()
        assert "constant" not in found
