"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from flashcard_app.config import create_default_config
from flashcard_app.gui.main_window import MainWindow

STYLESHEET = """
QLabel#card-face {
    background: #ffffff;
    border: 1px solid #d0d7de;
    border-radius: 12px;
    padding: 24px;
}
QLabel#section-title {
    font-size: 18px;
    font-weight: bold;
}
QFrame#stat-card {
    border: 1px solid #d0d7de;
    border-radius: 8px;
    padding: 8px;
}
"""


def main():
    """Launch the Flashcard App GUI application."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Flashcard App")
    app.setOrganizationName("FlashcardApp")
    app.setStyleSheet(STYLESHEET)

    window = MainWindow(create_default_config())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
