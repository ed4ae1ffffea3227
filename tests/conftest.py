"""
Shared fixtures for the Checknote test suite.
"""

import os

import pytest

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from checknote.models.note import Note
from checknote.utils.logger import Logger


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config, storage and log files inside the test's temp dir."""
    home = tmp_path / "checknote_home"
    monkeypatch.setenv("CHECKNOTE_HOME", str(home))
    return home


@pytest.fixture(scope="session", autouse=True)
def test_logger(tmp_path_factory):
    """Route the shared logger to a temporary log directory."""
    return Logger.configure(tmp_path_factory.mktemp("logs"), "DEBUG")


@pytest.fixture(scope="session")
def app():
    """Create QApplication for testing."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def sample_notes():
    """Three notes with fixed ids."""
    return [
        Note(id="a", title="Milk", content="Buy milk"),
        Note(id="b", title="Call", content="Call the bank\nbefore noon",
             is_completed=True),
        Note(id="c", title="Read", content=""),
    ]
