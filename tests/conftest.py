"""Shared fixtures: a headless QApplication and an isolated config."""

import os

# Must be set before any Qt module creates the application.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from cjkescape.config import Config


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def config(tmp_path):
    """A Config backed by a fresh temporary directory."""
    return Config(app_dir=tmp_path)
