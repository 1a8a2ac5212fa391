"""
MusicBank - Clipboard Access

Two-tier clipboard write.  The system clipboard is tried first; when it is
missing or does not take the text, the text is placed in a hidden,
selectable text widget whose selection is copied instead.
"""

import logging

from PyQt6.QtWidgets import QApplication, QPlainTextEdit

logger = logging.getLogger("musicbank.clipboard")


def _write_system_clipboard(text: str) -> bool:
    """Write through ``QClipboard`` and confirm by reading it back."""
    clipboard = QApplication.clipboard()
    if clipboard is None:
        return False
    clipboard.setText(text)
    return clipboard.text() == text


def _write_via_selection(text: str) -> bool:
    """Copy *text* by selecting it in an invisible text surface."""
    surface = QPlainTextEdit()
    surface.setPlainText(text)
    surface.selectAll()
    surface.copy()
    surface.deleteLater()
    clipboard = QApplication.clipboard()
    return clipboard is not None and clipboard.text() == text


def copy_text(text: str, primary=None, fallback=None) -> bool:
    """Copy *text* to the clipboard.

    Args:
        text: The text to copy.
        primary: Optional override of the first-tier writer.
        fallback: Optional override of the second-tier writer.

    Returns:
        True if either tier reports success.
    """
    primary = primary or _write_system_clipboard
    fallback = fallback or _write_via_selection

    try:
        if primary(text):
            return True
    except Exception as exc:
        logger.warning("Clipboard write failed: %s", exc)

    logger.info("Falling back to selection copy for %d chars", len(text))
    try:
        return fallback(text)
    except Exception as exc:
        logger.error("Selection copy failed: %s", exc)
        return False
