"""Tests for viewmap.core.exceptions."""

import pytest

from viewmap.core.exceptions import (
    ConfigurationError,
    DocumentError,
    InvalidDateError,
    InvalidShapeError,
    UnknownViewError,
    ViewMapError,
)


def test_hierarchy():
    """All exceptions should inherit from ViewMapError."""
    for exc_cls in [ConfigurationError, UnknownViewError, DocumentError, InvalidDateError, InvalidShapeError]:
        assert issubclass(exc_cls, ViewMapError)


def test_document_errors():
    assert issubclass(InvalidDateError, DocumentError)
    assert issubclass(InvalidShapeError, DocumentError)
    assert not issubclass(ConfigurationError, DocumentError)


def test_doc_id_defaults_to_none():
    err = InvalidDateError("created-at is missing")
    assert err.doc_id is None
    assert "missing" in str(err)


def test_doc_id_kept():
    err = InvalidShapeError("tags must be a list", doc_id="abc")
    assert err.doc_id == "abc"


def test_unknown_view_is_key_error():
    with pytest.raises(KeyError):
        raise UnknownViewError("No view registered as 'nope'")
    assert str(UnknownViewError("No view registered as 'nope'")) == "No view registered as 'nope'"


def test_catch_base():
    """Catching ViewMapError should catch all subtypes."""
    try:
        raise InvalidDateError("bad date")
    except ViewMapError as e:
        assert "bad date" in str(e)
