"""
MusicBank - Data Event Bus

Application-wide signal bus for change notifications between the creator
tab and the main window.

Usage::

    from event_bus import event_bus
    event_bus.api_key_changed.emit(True)           # after saving a key
    event_bus.api_key_changed.connect(self._update_status_bar)
"""

from PyQt6.QtCore import QObject, pyqtSignal


class DataEventBus(QObject):
    """Singleton event bus for data change notifications."""

    api_key_changed = pyqtSignal(bool)      # True when a key is configured
    generation_finished = pyqtSignal(bool)  # True on success


# Module-level singleton
event_bus = DataEventBus()
