"""
Shared fixtures for abbrkit tests.
"""

import pytest

import abbrkit.logging as abbr_logging
from abbrkit.cli.commands import CommandContext
from abbrkit.core import AbbreviationStore


@pytest.fixture
def source_path(tmp_path):
    """Universals source file location (not created)."""
    return tmp_path / "config" / "abbrkit" / "universal"


@pytest.fixture
def snapshot_path(tmp_path):
    """Snapshot file location (not created)."""
    return tmp_path / "tmp" / "abbrkit-universals.json"


@pytest.fixture
def open_store(source_path, snapshot_path):
    """Factory opening a store on the shared test files, like a new process."""
    def _open():
        return AbbreviationStore.open(source_path, snapshot_path)
    return _open


@pytest.fixture
def store(open_store):
    """A freshly started store."""
    return open_store()


@pytest.fixture
def ctx(store):
    """Command context with alias sources that must not be called."""
    def no_aliases():
        raise AssertionError("alias source should not be used")
    return CommandContext(store, alias_source=no_aliases, git_alias_source=no_aliases)


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    """Keep abbr.log out of the home directory."""
    monkeypatch.setattr(abbr_logging, "LOGS_DIR", tmp_path / "logs")
    yield
    abbr_logging.close_file_logging()
