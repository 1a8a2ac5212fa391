"""
MusicBank Test Fixtures

Shared pytest fixtures for database, Qt application, keyring and sample
API responses.
"""

import os
import sys
import pytest

# Ensure the musicbank modules are importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "musicbank"))

os.environ["QT_QPA_PLATFORM"] = "offscreen"


SAMPLE_RESPONSE = (
    "**가사:**\n"
    "[Verse 1]\n별빛 아래 걷는 밤\n너의 이름을 불러\n\n"
    "[Chorus]\n영원히 함께해\n\n"
    "**추천 스타일:**\n어쿠스틱 발라드, 느린 템포, 따뜻한 피아노\n\n"
    "**SUNO AI 형식:**\n[Style: Acoustic Ballad]\n[Verse 1]\n별빛 아래 걷는 밤\n"
)


@pytest.fixture(scope="session")
def qt_app():
    """Create a single QApplication instance for the entire test session."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def temp_db(tmp_path):
    """Provide a fresh Database instance backed by a temporary file."""
    from database import Database

    db = Database(db_path=str(tmp_path / "test.db"))
    yield db
    db.close()


@pytest.fixture(autouse=True)
def memory_keyring(monkeypatch):
    """Replace the system keyring with an in-memory dict for every test."""
    import keyring

    store: dict[tuple[str, str], str] = {}

    def get_password(service, username):
        return store.get((service, username))

    def set_password(service, username, password):
        store[(service, username)] = password

    monkeypatch.setattr(keyring, "get_password", get_password)
    monkeypatch.setattr(keyring, "set_password", set_password)
    return store


@pytest.fixture
def broken_keyring(monkeypatch):
    """Make every keyring call fail, as on a system without a backend."""
    import keyring
    from keyring.errors import NoKeyringError

    def fail(*_args, **_kwargs):
        raise NoKeyringError("No recommended backend was available.")

    monkeypatch.setattr(keyring, "get_password", fail)
    monkeypatch.setattr(keyring, "set_password", fail)


@pytest.fixture
def make_envelope():
    """Return a builder for successful generateContent response bodies."""
    def _build(text: str) -> dict:
        return {"candidates": [{"content": {"parts": [{"text": text}]}}]}
    return _build


@pytest.fixture
def sample_response() -> str:
    return SAMPLE_RESPONSE
