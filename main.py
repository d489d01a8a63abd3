"""
To-Do Tracker entry point.
A single-screen task list mirrored to a Firestore collection.
"""

from __future__ import annotations

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from todo_tracker.bootstrap import build_controller, build_remote_sync
from todo_tracker.settings import SettingsStore
from todo_tracker.ui.main_window import MainWindow
from todo_tracker.utils import get_data_dir


def setup_logging() -> None:
    log_dir = get_data_dir()
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "app.log")

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("To-Do Tracker")

    settings = SettingsStore().load()
    controller = build_controller(settings, build_remote_sync(settings))

    window = MainWindow(controller, settings.tag_vocabulary)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
