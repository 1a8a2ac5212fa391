"""MusicBank - Shared Widget Library."""

from widgets.toast import Toast, show_toast
from widgets.loading_overlay import LoadingOverlay

__all__ = ["Toast", "show_toast", "LoadingOverlay"]
