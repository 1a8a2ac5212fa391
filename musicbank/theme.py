"""
MusicBank - Centralized Theme Module

All color constants, button styles, notification colors, and the global
application stylesheet live here.  Widgets import from this module instead
of defining their own local color constants.
"""


class Theme:
    """Application-wide color and style constants."""

    # --- Core palette ---
    BG = "#2b2b2b"
    PANEL = "#353535"
    TEXT = "#e0e0e0"
    ACCENT = "#E8A838"
    DARK_TEXT = "#1a1a1a"
    DIMMED = "#808080"

    # --- Semantic colors ---
    SUCCESS = "#4CAF50"
    ERROR = "#F44336"
    WARNING = "#FF9800"
    INFO = "#2196F3"

    # --- Structural colors ---
    BORDER = "#555555"
    HOVER = "#454545"
    DISABLED_BG = "#3a3a3a"
    DISABLED_TEXT = "#666666"
    STATUSBAR_BG = "#1e1e1e"
    OVERLAY_BG = "rgba(0, 0, 0, 160)"

    # --- Notification gradients (start, end) ---
    TOAST_COLORS = {
        "success": ("#00b894", "#00a085"),
        "error":   ("#e74c3c", "#c0392b"),
        "info":    ("#74b9ff", "#0984e3"),
    }

    # -----------------------------------------------------------------
    # Reusable style fragments
    # -----------------------------------------------------------------

    @staticmethod
    def accent_button_style() -> str:
        """Gold accent button style (primary actions)."""
        return f"""
            QPushButton {{
                background-color: {Theme.ACCENT};
                color: {Theme.DARK_TEXT};
                border: none;
                border-radius: 4px;
                padding: 8px 20px;
                font-weight: bold;
                font-size: 13px;
            }}
            QPushButton:hover {{
                background-color: #F0B848;
            }}
            QPushButton:pressed {{
                background-color: #D09830;
            }}
            QPushButton:disabled {{
                background-color: {Theme.DISABLED_BG};
                color: {Theme.DISABLED_TEXT};
            }}
        """

    @staticmethod
    def secondary_button_style() -> str:
        """Gray secondary button style."""
        return f"""
            QPushButton {{
                background-color: {Theme.HOVER};
                color: {Theme.TEXT};
                border: 1px solid {Theme.BORDER};
                border-radius: 4px;
                padding: 8px 16px;
                font-size: 13px;
            }}
            QPushButton:hover {{
                background-color: {Theme.BORDER};
                border-color: {Theme.ACCENT};
            }}
            QPushButton:pressed {{
                background-color: {Theme.ACCENT};
                color: {Theme.DARK_TEXT};
            }}
            QPushButton:disabled {{
                background-color: {Theme.DISABLED_BG};
                color: {Theme.DISABLED_TEXT};
                border-color: #444444;
            }}
        """

    @staticmethod
    def panel_style() -> str:
        """Base panel input styling (for inner panels)."""
        return f"""
            QWidget {{
                background-color: {Theme.PANEL};
                color: {Theme.TEXT};
            }}
            QTextEdit, QPlainTextEdit, QLineEdit {{
                background-color: {Theme.BG};
                color: {Theme.TEXT};
                border: 1px solid {Theme.BORDER};
                border-radius: 4px;
                padding: 4px;
            }}
            QLabel {{
                color: {Theme.TEXT};
            }}
        """

    @staticmethod
    def toast_style(kind: str) -> str:
        """Gradient notification style for ``success``, ``error`` or ``info``."""
        start, end = Theme.TOAST_COLORS.get(kind, Theme.TOAST_COLORS["info"])
        return f"""
            QLabel {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {start}, stop:1 {end});
                color: white;
                font-weight: 500;
                padding: 15px 20px;
                border-radius: 10px;
            }}
        """

    @staticmethod
    def section_header_style() -> str:
        return f"font-size: 15px; font-weight: bold; color: {Theme.TEXT};"

    @staticmethod
    def global_stylesheet() -> str:
        """Return the full application stylesheet."""
        return f"""
QMainWindow {{
    background-color: {Theme.BG};
}}
QWidget {{
    background-color: {Theme.BG};
    color: {Theme.TEXT};
}}
QLabel {{
    color: {Theme.TEXT};
}}
QTextEdit, QLineEdit, QPlainTextEdit {{
    background-color: {Theme.PANEL};
    color: {Theme.TEXT};
    border: 1px solid {Theme.BORDER};
    border-radius: 4px;
    padding: 4px;
    selection-background-color: {Theme.ACCENT};
    selection-color: {Theme.DARK_TEXT};
}}
QTextEdit:focus, QLineEdit:focus, QPlainTextEdit:focus {{
    border: 1px solid {Theme.ACCENT};
}}
QPushButton {{
    background-color: {Theme.HOVER};
    color: {Theme.TEXT};
    border: 1px solid {Theme.BORDER};
    border-radius: 4px;
    padding: 8px 16px;
    font-size: 13px;
}}
QPushButton:hover {{
    background-color: {Theme.BORDER};
    border-color: {Theme.ACCENT};
}}
QPushButton:disabled {{
    background-color: {Theme.DISABLED_BG};
    color: {Theme.DISABLED_TEXT};
    border-color: #444444;
}}
QGroupBox {{
    color: {Theme.ACCENT};
    border: 1px solid {Theme.BORDER};
    border-radius: 6px;
    margin-top: 12px;
    padding-top: 16px;
    font-weight: bold;
}}
QGroupBox::title {{
    subcontrol-origin: margin;
    left: 12px;
    padding: 0 6px;
}}
QScrollBar:vertical {{
    background-color: {Theme.BG};
    width: 12px;
    margin: 0;
}}
QScrollBar::handle:vertical {{
    background-color: {Theme.BORDER};
    border-radius: 6px;
    min-height: 20px;
}}
QScrollBar::handle:vertical:hover {{
    background-color: {Theme.ACCENT};
}}
QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
    height: 0;
}}
QStatusBar {{
    background-color: {Theme.STATUSBAR_BG};
    color: {Theme.DIMMED};
    border-top: 1px solid {Theme.HOVER};
    font-size: 12px;
}}
"""
