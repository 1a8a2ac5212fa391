"""
MusicBank - Toast Notification Widget

A transient notification label pinned to the top-right corner of its
parent.  It slides in from the right edge, stays for a few seconds, then
slides back out and deletes itself.  Only one toast is shown per parent.
"""

from PyQt6.QtWidgets import QLabel, QWidget
from PyQt6.QtCore import Qt, QPoint, QPropertyAnimation, QEasingCurve, QTimer

from theme import Theme
from timeouts import TIMEOUTS

_MARGIN = 20
_MAX_WIDTH = 300


class Toast(QLabel):
    """Sliding notification label.

    Args:
        message: Text to display.
        kind: ``success``, ``error`` or ``info`` (controls the color).
        duration_ms: How long the toast stays fully visible.
        slide_ms: Duration of the slide in/out animations.
    """

    def __init__(
        self,
        message: str,
        kind: str = "info",
        parent: QWidget | None = None,
        duration_ms: int = TIMEOUTS["toast_visible_ms"],
        slide_ms: int = TIMEOUTS["toast_slide_ms"],
    ):
        super().__init__(message, parent)
        self.kind = kind
        self._slide_ms = slide_ms
        self.setObjectName(f"notification-{kind}")
        self.setWordWrap(True)
        self.setMaximumWidth(_MAX_WIDTH)
        self.setStyleSheet(Theme.toast_style(kind))
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.adjustSize()

        self._animation = QPropertyAnimation(self, b"pos", self)
        self._animation.setEasingCurve(QEasingCurve.Type.OutCubic)

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(duration_ms)
        self._timer.timeout.connect(self.slide_out)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def _shown_pos(self) -> QPoint:
        parent_width = self.parentWidget().width() if self.parentWidget() else 0
        return QPoint(max(parent_width - self.width() - _MARGIN, 0), _MARGIN)

    def _hidden_pos(self) -> QPoint:
        parent_width = self.parentWidget().width() if self.parentWidget() else 0
        return QPoint(parent_width, _MARGIN)

    # ------------------------------------------------------------------
    # Animations
    # ------------------------------------------------------------------

    def slide_in(self) -> None:
        """Show the toast and start the auto-dismiss timer."""
        self.move(self._hidden_pos())
        self.show()
        self.raise_()
        self._animation.stop()
        self._animation.setDuration(self._slide_ms)
        self._animation.setStartValue(self._hidden_pos())
        self._animation.setEndValue(self._shown_pos())
        self._animation.start()
        self._timer.start()

    def slide_out(self) -> None:
        """Animate the toast off-screen, then delete it."""
        self._animation.stop()
        self._animation.setDuration(self._slide_ms)
        self._animation.setStartValue(self.pos())
        self._animation.setEndValue(self._hidden_pos())
        self._animation.finished.connect(self.dismiss)
        self._animation.start()

    def dismiss(self) -> None:
        """Remove the toast immediately."""
        self._timer.stop()
        self._animation.stop()
        self.hide()
        self.setParent(None)
        self.deleteLater()


def show_toast(parent: QWidget, message: str, kind: str = "info") -> Toast:
    """Replace any toast on *parent* with a new one and slide it in."""
    for existing in parent.findChildren(
        Toast, options=Qt.FindChildOption.FindDirectChildrenOnly
    ):
        existing.dismiss()

    toast = Toast(message, kind, parent)
    toast.slide_in()
    return toast
