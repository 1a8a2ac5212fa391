"""
MusicBank - Base Tab Class

Provides ``BaseTab(QWidget)`` with a standard lifecycle contract for
MusicBank views: UI construction, signal wiring, data refresh, worker
cleanup, and toast notifications.

Subclasses must implement ``_init_ui()``; other hooks are optional.
"""

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import QThread

from database import Database
from widgets.toast import Toast, show_toast


class BaseTab(QWidget):
    """Base class for MusicBank tabs.

    Lifecycle:
        ``__init__``  → ``_init_ui()`` → ``_connect_signals()`` → ``refresh()``

    Subclasses override the hook methods.  The base class manages worker
    registration and cleanup.
    """

    def __init__(self, db: Database, parent=None):
        super().__init__(parent)
        self.db = db
        self._workers: list[QThread] = []
        self._init_ui()
        self._connect_signals()

    # ------------------------------------------------------------------
    # Lifecycle hooks (override in subclasses)
    # ------------------------------------------------------------------

    def _init_ui(self) -> None:
        """Build the UI.  Called once during ``__init__``."""
        raise NotImplementedError

    def _connect_signals(self) -> None:
        """Connect signals to slots.  Called once after ``_init_ui``."""
        pass

    def refresh(self) -> None:
        """Reload data from the database.

        The default implementation does nothing.
        """
        pass

    def cleanup(self) -> None:
        """Wait for running workers before the window closes.

        Generation requests cannot be cancelled, so a running worker is
        given a bounded wait instead.
        """
        for w in self._workers:
            if w.isRunning():
                w.requestInterruption()
                w.wait(3000)

    # ------------------------------------------------------------------
    # Shared utilities
    # ------------------------------------------------------------------

    def register_worker(self, worker: QThread) -> None:
        """Track a worker thread for cleanup on close."""
        self._workers = [w for w in self._workers if w.isRunning()]
        self._workers.append(worker)

    def notify(self, message: str, kind: str = "info") -> Toast:
        """Show a toast notification over this tab."""
        return show_toast(self, message, kind)

    def notify_success(self, message: str) -> Toast:
        return self.notify(message, "success")

    def notify_error(self, message: str) -> Toast:
        return self.notify(message, "error")
