"""
MusicBank - Loading Overlay Widget

A translucent panel that covers its parent while a request is running and
follows the parent's size.
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt6.QtCore import Qt, QEvent

from theme import Theme


class LoadingOverlay(QWidget):
    """Full-size busy overlay with a centered message.

    Args:
        message: Text shown in the middle of the overlay.
    """

    def __init__(self, parent: QWidget, message: str = "가사를 생성하고 있습니다..."):
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground)
        self.setStyleSheet(f"LoadingOverlay {{ background-color: {Theme.OVERLAY_BG}; }}")

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.label = QLabel(message)
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.label.setStyleSheet(
            f"color: {Theme.ACCENT}; font-size: 18px; font-weight: bold; "
            f"background: transparent;"
        )
        layout.addWidget(self.label)

        parent.installEventFilter(self)
        self.hide()

    def eventFilter(self, obj, event):
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self.resize(obj.size())
        return super().eventFilter(obj, event)

    def show_over(self) -> None:
        """Cover the parent and block its input."""
        self.resize(self.parentWidget().size())
        self.show()
        self.raise_()

    def hide_overlay(self) -> None:
        self.hide()
