"""Application entry point and setup for Swifty Words."""

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from swiftywords.core.controller import GameController
from swiftywords.core.levels import LevelRepository
from swiftywords.core.settings import load_settings
from swiftywords.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run(settings_path: Optional[Path] = None) -> None:
    """Load settings and levels, then start the game window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Swifty Words")
    app.setApplicationDisplayName("Swifty Words")

    app_font = QFont()
    app_font.setPointSize(11)
    app.setFont(app_font)

    settings = load_settings(settings_path)
    levels = LevelRepository(settings.levels_dir)
    logging.info("Levels available in %s: %s", levels.base_dir, levels.available())
    controller = GameController(levels=levels, settings=settings)

    window = MainWindow(controller)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(1100, geometry.width()), min(820, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
