"""
MusicBank - Lyrics Creator Tab

The main workflow view.  The top of the page holds the API key and the
topic input; the result section below it shows the generated lyrics, the
recommended style, and the SUNO AI format, each with copy actions.

The API call runs in a background QThread so the UI stays responsive.
Only one request may be in flight; the tab owns that busy state.
"""

import logging

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPlainTextEdit, QLineEdit,
    QPushButton, QScrollArea, QGroupBox,
)
from PyQt6.QtCore import Qt, QThread, pyqtSignal
from PyQt6.QtGui import QFont, QShortcut, QKeySequence

from ai_models import resolve_model
from api_client import LyricsGenerator, LyricsRequestError, describe_error
from clipboard import copy_text
from event_bus import event_bus
from response_parser import CopyTarget, ParsedSections, format_for_copy
from secure_config import API_KEY_NAME, get_secret, set_secret
from tabs.base_tab import BaseTab
from theme import Theme
from timeouts import get_timeout
from validators import validate_api_key, validate_generation_request
from widgets.loading_overlay import LoadingOverlay

logger = logging.getLogger("musicbank.creator")

FALLBACK_LYRICS = "가사를 생성할 수 없습니다."
FALLBACK_STYLE = "스타일을 추천할 수 없습니다."
FALLBACK_SUNO = "SUNO 형식을 생성할 수 없습니다."

MSG_KEY_SAVED = "API 키가 저장되었습니다!"
MSG_GENERATED = "가사가 성공적으로 생성되었습니다!"
MSG_BUSY = "이미 가사를 생성하고 있습니다."
MSG_COPIED = "클립보드에 복사되었습니다!"
MSG_COPY_FAILED = "클립보드에 복사하지 못했습니다."


# ===================================================================
# GenerateWorker: runs the API call off the main thread
# ===================================================================

class GenerateWorker(QThread):
    """Background worker that calls LyricsGenerator.generate_sections()."""

    result_ready = pyqtSignal(object)   # ParsedSections
    error = pyqtSignal(str)             # user-facing message

    def __init__(
        self,
        api_key: str,
        topic: str,
        model: str | None = None,
        timeout: float | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self._api_key = api_key
        self._topic = topic
        self._model = model
        self._timeout = timeout

    def run(self):
        try:
            generator = LyricsGenerator(
                api_key=self._api_key, model=self._model, timeout=self._timeout,
            )
            sections = generator.generate_sections(self._topic)
            self.result_ready.emit(sections)
        except LyricsRequestError as exc:
            logger.error("Lyrics generation failed: %s", exc)
            self.error.emit(describe_error(exc))
        except Exception as exc:
            logger.exception("Unexpected error during lyrics generation")
            self.error.emit(describe_error(exc))


# ===================================================================
# LyricsCreatorTab
# ===================================================================

class LyricsCreatorTab(BaseTab):
    """Topic in, lyrics / style / SUNO format out."""

    def __init__(self, db, parent=None):
        # Instance variables needed before _init_ui() runs
        self._worker: GenerateWorker | None = None
        self._busy = False

        super().__init__(db, parent)

        self.refresh()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _init_ui(self):
        """Assemble the full tab layout."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(0, 0, 0, 0)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)

        content = QWidget()
        content.setStyleSheet(Theme.panel_style())
        layout = QVBoxLayout(content)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        layout.addWidget(self._build_api_key_group())
        layout.addWidget(self._build_input_group())

        self.output_section = self._build_output_section()
        self.output_section.setVisible(False)
        layout.addWidget(self.output_section)
        layout.addStretch()

        self._scroll.setWidget(content)
        root_layout.addWidget(self._scroll)

        self.loading_overlay = LoadingOverlay(self)

    # ---------- API key ----------

    def _build_api_key_group(self) -> QGroupBox:
        group = QGroupBox("Gemini API 키")
        row = QHBoxLayout(group)
        row.setSpacing(8)

        self.api_key_input = QLineEdit()
        self.api_key_input.setEchoMode(QLineEdit.EchoMode.Password)
        self.api_key_input.setPlaceholderText("API 키를 입력하세요")
        self.api_key_input.returnPressed.connect(self.save_api_key)
        row.addWidget(self.api_key_input, 1)

        self.toggle_key_btn = QPushButton("Show")
        self.toggle_key_btn.setStyleSheet(Theme.secondary_button_style())
        self.toggle_key_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.toggle_key_btn.clicked.connect(self.toggle_api_key_visibility)
        row.addWidget(self.toggle_key_btn)

        self.save_key_btn = QPushButton("저장")
        self.save_key_btn.setStyleSheet(Theme.secondary_button_style())
        self.save_key_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.save_key_btn.clicked.connect(self.save_api_key)
        row.addWidget(self.save_key_btn)

        return group

    # ---------- Topic input ----------

    def _build_input_group(self) -> QGroupBox:
        group = QGroupBox("가사 주제")
        layout = QVBoxLayout(group)
        layout.setSpacing(8)

        self.topic_input = QPlainTextEdit()
        self.topic_input.setPlaceholderText(
            "어떤 노래를 만들고 싶으신가요? 주제나 내용을 자유롭게 적어주세요. "
            "(Ctrl+Enter로 생성)"
        )
        self.topic_input.setMinimumHeight(120)
        layout.addWidget(self.topic_input)

        for keys in ("Ctrl+Return", "Ctrl+Enter"):
            shortcut = QShortcut(QKeySequence(keys), self.topic_input)
            shortcut.setContext(Qt.ShortcutContext.WidgetShortcut)
            shortcut.activated.connect(self.generate_lyrics)

        self.generate_btn = QPushButton("가사 생성")
        self.generate_btn.setStyleSheet(Theme.accent_button_style())
        self.generate_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.generate_btn.clicked.connect(self.generate_lyrics)
        layout.addWidget(self.generate_btn)

        return group

    # ---------- Result section ----------

    def _build_output_panel(self, title: str) -> tuple[QWidget, QPlainTextEdit]:
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        label = QLabel(title)
        label.setStyleSheet(Theme.section_header_style())
        layout.addWidget(label)

        output = QPlainTextEdit()
        output.setReadOnly(True)
        output.setMinimumHeight(140)
        layout.addWidget(output)
        return panel, output

    def _build_output_section(self) -> QGroupBox:
        group = QGroupBox("생성 결과")
        layout = QVBoxLayout(group)
        layout.setSpacing(10)

        lyrics_panel, self.lyrics_output = self._build_output_panel("🎵 가사")
        mono_font = QFont("Courier New", 11)
        mono_font.setStyleHint(QFont.StyleHint.Monospace)
        self.lyrics_output.setFont(mono_font)
        self.lyrics_output.setMinimumHeight(220)
        layout.addWidget(lyrics_panel)

        style_panel, self.style_output = self._build_output_panel("🎨 추천 스타일")
        self.style_output.setMinimumHeight(80)
        layout.addWidget(style_panel)

        suno_panel, self.suno_output = self._build_output_panel("🎤 SUNO AI 형식")
        layout.addWidget(suno_panel)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(8)

        self.copy_all_btn = QPushButton("전체 복사")
        self.copy_lyrics_btn = QPushButton("가사만 복사")
        self.copy_suno_btn = QPushButton("SUNO 형식 복사")
        for btn, target in (
            (self.copy_all_btn, CopyTarget.ALL),
            (self.copy_lyrics_btn, CopyTarget.LYRICS),
            (self.copy_suno_btn, CopyTarget.SUNO),
        ):
            btn.setStyleSheet(Theme.secondary_button_style())
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.clicked.connect(lambda _checked=False, t=target: self.copy_result(t))
            btn_row.addWidget(btn)

        layout.addLayout(btn_row)
        return group

    # ------------------------------------------------------------------
    # Data refresh helpers
    # ------------------------------------------------------------------

    def refresh(self):
        """Load the saved API key into the key field."""
        saved_key = get_secret(API_KEY_NAME, fallback_db=self.db)
        if saved_key:
            self.api_key_input.setText(saved_key)

    # ------------------------------------------------------------------
    # API key
    # ------------------------------------------------------------------

    def save_api_key(self):
        """Persist the key typed into the key field."""
        api_key = self.api_key_input.text().strip()
        errors = validate_api_key(api_key)
        if errors:
            self.notify_error(errors[0].message)
            return

        set_secret(API_KEY_NAME, api_key, fallback_db=self.db)
        self.notify_success(MSG_KEY_SAVED)
        event_bus.api_key_changed.emit(True)

    def toggle_api_key_visibility(self):
        """Toggle between showing and hiding the API key."""
        if self.api_key_input.echoMode() == QLineEdit.EchoMode.Password:
            self.api_key_input.setEchoMode(QLineEdit.EchoMode.Normal)
            self.toggle_key_btn.setText("Hide")
        else:
            self.api_key_input.setEchoMode(QLineEdit.EchoMode.Password)
            self.toggle_key_btn.setText("Show")

    # ------------------------------------------------------------------
    # Generation workflow
    # ------------------------------------------------------------------

    @property
    def is_busy(self) -> bool:
        """True while a generation request is outstanding."""
        return self._busy

    def _set_busy(self, busy: bool) -> None:
        self._busy = busy
        self.generate_btn.setEnabled(not busy)
        if busy:
            self.loading_overlay.show_over()
        else:
            self.loading_overlay.hide_overlay()

    def generate_lyrics(self):
        """Validate inputs, then kick off background generation."""
        if self._busy:
            self.notify(MSG_BUSY)
            return

        topic = self.topic_input.toPlainText().strip()
        api_key = self.api_key_input.text().strip()

        errors = validate_generation_request(topic, api_key)
        if errors:
            self.notify_error(errors[0].message)
            return

        self._set_busy(True)

        # Unparented; dropped from _workers once a later request finds it finished
        self._worker = GenerateWorker(
            api_key=api_key,
            topic=topic,
            model=resolve_model(self.db),
            timeout=get_timeout(self.db, "api_request_s"),
        )
        self.register_worker(self._worker)
        self._worker.result_ready.connect(self._on_generation_complete)
        self._worker.error.connect(self._on_generation_error)
        self._worker.start()

    def _on_generation_complete(self, sections: ParsedSections):
        """Populate the result panels with the parsed sections."""

        self.lyrics_output.setPlainText(sections.lyrics or FALLBACK_LYRICS)
        self.style_output.setPlainText(sections.style or FALLBACK_STYLE)
        self.suno_output.setPlainText(sections.suno_format or FALLBACK_SUNO)

        self.output_section.setVisible(True)
        self._scroll.ensureWidgetVisible(self.output_section)

        self._set_busy(False)
        self.notify_success(MSG_GENERATED)
        event_bus.generation_finished.emit(True)

    def _on_generation_error(self, message: str):
        """Show the failure and return to the idle state."""
        self._set_busy(False)
        self.notify_error(message)
        event_bus.generation_finished.emit(False)

    # ------------------------------------------------------------------
    # Copy actions
    # ------------------------------------------------------------------

    def copy_result(self, target: CopyTarget):
        """Copy all sections, the lyrics, or the SUNO format."""
        text = format_for_copy(
            self.lyrics_output.toPlainText(),
            self.style_output.toPlainText(),
            self.suno_output.toPlainText(),
            target,
        )
        if copy_text(text):
            self.notify_success(MSG_COPIED)
        else:
            self.notify_error(MSG_COPY_FAILED)
