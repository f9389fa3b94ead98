"""Application entry point and setup for the keyboard trainer."""

import logging
import random
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from keytrainer.core.generator import TextGenerator
from keytrainer.core.settings import SettingsStore, resolve_seed
from keytrainer.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_generator(settings_store: SettingsStore) -> TextGenerator:
    """Seed the single random source used for the whole process lifetime."""
    seed = resolve_seed(settings_store.get())
    if seed is not None:
        logging.info("Using fixed random seed %d", seed)
    return TextGenerator(random.Random(seed))


def run() -> None:
    """Initialize the application, load settings, and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("KeyTrainer")
    app.setApplicationDisplayName("Keyboard Trainer")

    settings_store = SettingsStore()
    logging.info("Settings file: %s", settings_store.file_path)
    generator = create_generator(settings_store)

    window = MainWindow(generator=generator, settings_store=settings_store)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(1280, geometry.width()), min(720, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
