#!/usr/bin/env python3
"""MusicBank: AI lyrics generator for SUNO AI."""

import sys
import os

# Add the musicbank directory to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from logging_config import setup_logging
from PyQt6.QtWidgets import QApplication
from theme import Theme
from app import MainWindow


def main():
    setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("MusicBank")
    app.setOrganizationName("MusicBank")
    app.setStyleSheet(Theme.global_stylesheet())

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
