"""Smoke tests for the main window and logging setup."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from secure_config import API_KEY_NAME, SERVICE_NAME


@pytest.fixture
def window(qt_app, temp_db):
    from app import MainWindow
    from event_bus import event_bus
    window = MainWindow(db=temp_db)
    yield window
    event_bus.api_key_changed.disconnect(window._update_status_bar)
    window.creator_tab.cleanup()


def test_main_window_builds(window):
    assert window.centralWidget() is window.creator_tab
    assert window.api_label.text() == "API: Not configured"
    assert window.model_label.text() == "Model: Gemini 2.5 Flash Preview"


def test_status_bar_follows_saved_key(window, memory_keyring):
    window.creator_tab.api_key_input.setText("key")
    window.creator_tab.save_api_key()
    assert memory_keyring[(SERVICE_NAME, API_KEY_NAME)] == "key"
    assert window.api_label.text() == "API: Configured"


@pytest.fixture
def fresh_loggers():
    """Detach the musicbank handlers for the test, then restore them."""
    root = logging.getLogger("musicbank")
    api = logging.getLogger("musicbank.api")
    saved = (list(root.handlers), list(api.handlers))
    root.handlers.clear()
    api.handlers.clear()
    yield root, api
    for handler in root.handlers + api.handlers:
        handler.close()
    root.handlers[:], api.handlers[:] = saved


def test_setup_logging_adds_handlers_once(tmp_path, fresh_loggers):
    from logging_config import setup_logging
    root, api = fresh_loggers
    setup_logging(str(tmp_path))
    setup_logging(str(tmp_path))
    assert len(root.handlers) == 2
    assert len(api.handlers) == 1
    assert (tmp_path / "musicbank.log").exists()
    assert (tmp_path / "requests.log").exists()


@patch("api_client.requests.post")
def test_request_lifecycle_goes_to_request_log(mock_post, tmp_path, fresh_loggers, make_envelope):
    from api_client import LyricsGenerator
    from logging_config import setup_logging
    setup_logging(str(tmp_path))

    resp = MagicMock()
    resp.status_code = 200
    resp.json.return_value = make_envelope("**가사:**A")
    mock_post.return_value = resp
    LyricsGenerator("secret-key", model="gemini-2.0-flash").generate_content("봄날")

    for handler in fresh_loggers[0].handlers + fresh_loggers[1].handlers:
        handler.flush()
    request_log = (tmp_path / "requests.log").read_text(encoding="utf-8")
    assert "Requesting lyrics from gemini-2.0-flash" in request_log
    assert "Gemini responded HTTP 200" in request_log
    assert "secret-key" not in request_log

    app_log = (tmp_path / "musicbank.log").read_text(encoding="utf-8")
    assert "musicbank.api [MainThread]" in app_log


def test_other_loggers_stay_out_of_request_log(tmp_path, fresh_loggers):
    from logging_config import setup_logging
    setup_logging(str(tmp_path))
    logging.getLogger("musicbank.creator").warning("copy failed")
    for handler in fresh_loggers[0].handlers + fresh_loggers[1].handlers:
        handler.flush()
    assert "copy failed" not in (tmp_path / "requests.log").read_text(encoding="utf-8")
    assert "copy failed" in (tmp_path / "musicbank.log").read_text(encoding="utf-8")
