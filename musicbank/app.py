from PyQt6.QtWidgets import (
    QMainWindow, QStatusBar, QLabel, QDialog, QVBoxLayout, QTextEdit, QPushButton,
)
from PyQt6.QtCore import QPropertyAnimation
from PyQt6.QtGui import QShortcut, QKeySequence

from ai_models import get_model_display_name, resolve_model
from database import Database
from event_bus import event_bus
from secure_config import API_KEY_NAME, get_secret
from tabs.creator import LyricsCreatorTab
from theme import Theme
from timeouts import get_timeout


class MainWindow(QMainWindow):
    def __init__(self, db: Database | None = None):
        super().__init__()
        self.setWindowTitle("MusicBank - AI 가사 생성기")
        self.setMinimumSize(900, 760)

        self.db = db or Database()
        self._fade_animation = None
        self._faded_in = False

        self.creator_tab = LyricsCreatorTab(self.db)
        self.setCentralWidget(self.creator_tab)

        self._setup_status_bar()
        self._setup_shortcuts()
        event_bus.api_key_changed.connect(self._update_status_bar)

    def _setup_status_bar(self):
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.model_label = QLabel()
        self.api_label = QLabel()

        self.status_bar.addWidget(self.model_label, 1)
        self.status_bar.addPermanentWidget(self.api_label)

        self._update_status_bar()

    def _update_status_bar(self, *_args):
        model = resolve_model(self.db)
        self.model_label.setText(f"Model: {get_model_display_name(model)}")

        if get_secret(API_KEY_NAME, fallback_db=self.db):
            self.api_label.setText("API: Configured")
            self.api_label.setStyleSheet(f"color: {Theme.SUCCESS};")
        else:
            self.api_label.setText("API: Not configured")
            self.api_label.setStyleSheet(f"color: {Theme.ERROR};")

    def _setup_shortcuts(self):
        """Register application-wide keyboard shortcuts."""
        QShortcut(QKeySequence("Ctrl+/"), self).activated.connect(self._show_help)

    def _show_help(self):
        """Show the keyboard shortcuts help dialog."""
        dlg = QDialog(self)
        dlg.setWindowTitle("Keyboard Shortcuts")
        dlg.setMinimumSize(420, 260)
        layout = QVBoxLayout(dlg)

        text = QTextEdit()
        text.setReadOnly(True)
        text.setHtml(f"""
        <h3 style="color: {Theme.ACCENT};">Keyboard Shortcuts</h3>
        <table style="font-size: 13px;">
        <tr><td><b>Ctrl+Enter</b></td><td>Generate lyrics (in the topic box)</td></tr>
        <tr><td><b>Enter</b></td><td>Save the API key (in the key field)</td></tr>
        <tr><td><b>Ctrl+/</b></td><td>Show this help dialog</td></tr>
        </table>
        """)
        layout.addWidget(text)

        close_btn = QPushButton("Close")
        close_btn.clicked.connect(dlg.accept)
        layout.addWidget(close_btn)

        dlg.exec()

    def showEvent(self, event):
        super().showEvent(event)
        if self._faded_in:
            return
        self._faded_in = True
        self.setWindowOpacity(0.0)
        self._fade_animation = QPropertyAnimation(self, b"windowOpacity", self)
        self._fade_animation.setDuration(get_timeout(self.db, "fade_in_ms"))
        self._fade_animation.setStartValue(0.0)
        self._fade_animation.setEndValue(1.0)
        self._fade_animation.start()

    def closeEvent(self, event):
        # Wait for the generation worker before closing
        self.creator_tab.cleanup()
        event_bus.api_key_changed.disconnect(self._update_status_bar)
        self.db.close()
        event.accept()
