"""Tests for the centralized Theme module."""

from theme import Theme


def test_core_colors_are_hex():
    for attr in ("BG", "PANEL", "TEXT", "ACCENT", "ERROR", "SUCCESS", "WARNING"):
        val = getattr(Theme, attr)
        assert val.startswith("#"), f"Theme.{attr} = {val!r} is not a hex color"
        assert len(val) == 7, f"Theme.{attr} = {val!r} is not #RRGGBB"


def test_toast_colors_keys():
    assert set(Theme.TOAST_COLORS.keys()) == {"success", "error", "info"}


def test_toast_style_uses_kind_gradient():
    start, end = Theme.TOAST_COLORS["error"]
    style = Theme.toast_style("error")
    assert start in style and end in style


def test_toast_style_unknown_kind_is_info():
    assert Theme.toast_style("bogus") == Theme.toast_style("info")


def test_global_stylesheet_not_empty():
    ss = Theme.global_stylesheet()
    assert len(ss) > 100
    assert "QMainWindow" in ss
    assert Theme.ACCENT in ss


def test_accent_button_style():
    style = Theme.accent_button_style()
    assert "QPushButton" in style
    assert Theme.ACCENT in style


def test_secondary_button_style():
    style = Theme.secondary_button_style()
    assert "QPushButton" in style


def test_panel_style():
    style = Theme.panel_style()
    assert "QWidget" in style
    assert Theme.PANEL in style
