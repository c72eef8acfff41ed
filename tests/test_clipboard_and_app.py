"""Tests for the clipboard wrapper and the application controller."""

import runpy
import sys
from pathlib import Path

import pyperclip

import cjkescape.app
from cjkescape.app import CjkEscapeApp
from cjkescape.gui.main_window import ConverterWindow
from cjkescape.utils import clipboard_manager


def test_copy_to_clipboard_success(monkeypatch):
    copied = []
    monkeypatch.setattr(clipboard_manager.pyperclip, "copy", copied.append)

    assert clipboard_manager.copy_to_clipboard("\\u4e2d") is True
    assert copied == ["\\u4e2d"]


def test_copy_to_clipboard_without_clipboard(monkeypatch):
    def no_clipboard(text):
        raise pyperclip.PyperclipException("no copy/paste mechanism")

    monkeypatch.setattr(clipboard_manager.pyperclip, "copy", no_clipboard)

    assert clipboard_manager.copy_to_clipboard("中文") is False


def test_app_builds_themed_window(qapp, config):
    app = CjkEscapeApp(qapp, config)
    try:
        assert isinstance(app.window, ConverterWindow)
        assert app.window.config is config
        app.show()
        assert app.window.isVisible()
    finally:
        app.window.close()


def test_launcher_runs_from_checkout(monkeypatch):
    """main.py finds the package under src/ without an install."""
    launcher = Path(__file__).resolve().parent.parent / "main.py"
    src_path = str(launcher.parent / "src")
    monkeypatch.setattr(sys, "path", [p for p in sys.path if p != src_path])

    namespace = runpy.run_path(str(launcher), run_name="launcher")

    assert src_path in sys.path
    assert namespace["main"] is cjkescape.app.main
