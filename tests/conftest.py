"""Shared test fixtures for viewmap."""

import os
import sys
import tempfile

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo setup_logging() calls made by CLI tests (their stderr is closed afterwards)."""
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), level="WARNING")


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "logging": {"level": "debug"},
        "views": {"on_error": "abort", "plugins": False},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def entry():
    """A well-formed entry document."""
    return {
        "_id": "entry-1",
        "type": "entry",
        "created-at": "2023-05-07T03:04:05.123Z",
        "tags": ["a", "b", "a"],
        "text": "Hello, World-Wide *Web*",
    }


@pytest.fixture
def comment():
    """A non-entry document carrying entry-like fields."""
    return {
        "_id": "comment-1",
        "type": "comment",
        "created-at": "2023-05-07T03:04:05Z",
        "tags": ["x"],
        "text": "not indexed",
    }
