"""Tests for the two-tier clipboard writer."""

from clipboard import copy_text


def test_primary_success_skips_fallback(qt_app):
    calls = []

    def primary(text):
        calls.append(("primary", text))
        return True

    def fallback(text):
        calls.append(("fallback", text))
        return True

    assert copy_text("가사", primary=primary, fallback=fallback) is True
    assert calls == [("primary", "가사")]


def test_primary_failure_uses_fallback(qt_app):
    calls = []

    def fallback(text):
        calls.append(text)
        return True

    assert copy_text("가사", primary=lambda _t: False, fallback=fallback) is True
    assert calls == ["가사"]


def test_primary_exception_uses_fallback(qt_app):
    def primary(_text):
        raise RuntimeError("clipboard unavailable")

    assert copy_text("x", primary=primary, fallback=lambda _t: True) is True


def test_both_tiers_fail(qt_app):
    def fallback(_text):
        raise RuntimeError("no selection support")

    assert copy_text("x", primary=lambda _t: False, fallback=fallback) is False
