"""Tests for loading and defaulting the INI configuration."""

import logging

from cjkescape import config as config_module
from cjkescape.config import Config


def test_defaults_written_on_first_run(tmp_path):
    """A missing config.ini is created with the default values and a header."""
    cfg = Config(app_dir=tmp_path / "CjkEscape")

    assert cfg.config_file_path.exists()
    content = cfg.config_file_path.read_text(encoding="utf-8")
    assert content.startswith("# CjkEscape Configuration File")
    assert "[Display]" in content
    assert cfg.theme == "light"
    assert cfg.window_width == 600
    assert cfg.window_height == 500
    assert cfg.text_font_size == 14
    assert cfg.button_font_size == 12
    assert cfg.log_level == logging.INFO


def test_user_values_override_defaults(tmp_path):
    (tmp_path / "config.ini").write_text(
        "[General]\nlog_level = debug\n\n"
        "[Display]\ntheme = Dark\nwindow_width = 800\ntext_font_family = Consolas\n",
        encoding="utf-8",
    )
    cfg = Config(app_dir=tmp_path)

    assert cfg.log_level == logging.DEBUG
    assert cfg.theme == "dark"
    assert cfg.window_width == 800
    assert cfg.window_height == 500
    assert cfg.text_font_family == "Consolas"


def test_invalid_values_fall_back(tmp_path):
    (tmp_path / "config.ini").write_text(
        "[General]\nlog_level = chatty\n\n"
        "[Display]\nwindow_width = wide\nwindow_height = -5\nbutton_font_size = 0\n",
        encoding="utf-8",
    )
    cfg = Config(app_dir=tmp_path)

    assert cfg.log_level == logging.INFO
    assert cfg.window_width == 600
    assert cfg.window_height == 500
    assert cfg.button_font_size == 12


def test_unparseable_file_uses_defaults(tmp_path):
    (tmp_path / "config.ini").write_text("no section header here\n", encoding="utf-8")
    cfg = Config(app_dir=tmp_path)

    assert cfg.theme == "light"
    assert cfg.window_width == 600


def test_unwritable_directory_keeps_defaults(tmp_path):
    """Failing to write config.ini is not fatal."""
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    cfg = Config(app_dir=blocker / "CjkEscape")

    assert not cfg.config_file_path.exists()
    assert cfg.theme == "light"


def test_get_config_is_shared(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.setattr(config_module, "get_app_dir", lambda: tmp_path)

    first = config_module.get_config()
    assert config_module.get_config() is first
    assert first.app_dir == tmp_path


def test_percent_signs_are_read_literally(tmp_path):
    """A stray % is plain text, not interpolation syntax."""
    (tmp_path / "config.ini").write_text(
        "[Display]\nwindow_width = 50%\ntext_font_family = 100%Mono\n"
        "button_font_family = %(missing)s\n",
        encoding="utf-8",
    )
    cfg = Config(app_dir=tmp_path)

    assert cfg.window_width == 600
    assert cfg.text_font_family == "100%Mono"
    assert cfg.button_font_family == "%(missing)s"
