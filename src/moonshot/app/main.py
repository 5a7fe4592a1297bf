"""Desktop app launcher."""

from __future__ import annotations

import sys

from PySide6 import QtWidgets

from ..io.config import GameConfig
from .window import MainWindow


def run_app(config: GameConfig | None = None) -> int:
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    window = MainWindow(config)
    window.show()
    return app.exec()
