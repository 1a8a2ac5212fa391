"""
MusicBank - SQLite Database Module

Provides a Database class holding the application configuration table:
the model override, timeout overrides, and the API key when no system
keyring is available.

Database location: ~/.musicbank/musicbank.db
"""

import sqlite3
from pathlib import Path
from contextlib import contextmanager
from typing import Any, Optional


DB_DIR = Path.home() / ".musicbank"
DB_PATH = DB_DIR / "musicbank.db"

# ---------------------------------------------------------------------------
# SQL: Table creation
# ---------------------------------------------------------------------------

_CREATE_CONFIG = """
CREATE TABLE IF NOT EXISTS config (
    key   TEXT PRIMARY KEY,
    value TEXT
);
"""


class Database:
    """SQLite database interface for the MusicBank application."""

    def __init__(self, db_path: str | None = None) -> None:
        """Initialise the database: create the storage directory, open a
        connection, and ensure all tables exist."""
        if db_path is None:
            DB_DIR.mkdir(parents=True, exist_ok=True)
            db_path = str(DB_PATH)
        self._db_path = db_path
        self._conn = sqlite3.connect(self._db_path)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL;")
        self._create_tables()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _create_tables(self) -> None:
        """Create all tables if they do not already exist."""
        with self._cursor() as cur:
            cur.execute(_CREATE_CONFIG)

    @contextmanager
    def _cursor(self):
        """Yield a cursor inside a transaction.  Commits on success,
        rolls back on failure."""
        cur = self._conn.cursor()
        try:
            yield cur
            self._conn.commit()
        except sqlite3.Error:
            self._conn.rollback()
            raise
        finally:
            cur.close()

    @property
    def path(self) -> str:
        return self._db_path

    # ------------------------------------------------------------------
    # Connection management
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    # ==================================================================
    # CONFIG
    # ==================================================================

    def get_config(self, key: str, default: Any = None) -> Optional[str]:
        """Retrieve a configuration value by key, or *default* if missing."""
        with self._cursor() as cur:
            cur.execute("SELECT value FROM config WHERE key = ?;", (key,))
            row = cur.fetchone()
            return row["value"] if row else default

    def set_config(self, key: str, value: str) -> None:
        """Insert or update a configuration key/value pair."""
        with self._cursor() as cur:
            cur.execute(
                """
                INSERT INTO config (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value;
                """,
                (key, value),
            )

    def get_all_config(self) -> dict[str, str]:
        """Return every configuration entry as a plain dict."""
        with self._cursor() as cur:
            cur.execute("SELECT key, value FROM config ORDER BY key;")
            return {row["key"]: row["value"] for row in cur.fetchall()}
