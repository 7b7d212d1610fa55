"""
main.py - Application entry point.

Run from the placefinder/ root:
    python main.py

Reads ./placefinder.json if present (see placefinder_app/models/app_config.py).
"""

import logging
import sys
from pathlib import Path

# Make sure the project root is on the path
sys.path.insert(0, str(Path(__file__).parent))

from PySide6.QtWidgets import QApplication
from placefinder_app.gui.main_window import MainWindow
from placefinder_app.models.app_config import AppConfig


def main():
    cfg = AppConfig.load()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Placefinder")
    app.setStyle("Fusion")   # consistent look across Windows/Mac/Linux

    window = MainWindow(cfg)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
