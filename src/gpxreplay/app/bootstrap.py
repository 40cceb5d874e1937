from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from PyQt6.QtCore import QCoreApplication, Qt
from PyQt6.QtWidgets import QApplication

from gpxreplay.app.config import APP_NAME, APP_VERSION, LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure le logging racine (une seule fois, niveau depuis la config)."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def run(argv: Sequence[str]) -> int:
    configure_logging()

    # QtWebEngine nécessite cette option AVANT la création de QCoreApplication.
    QCoreApplication.setAttribute(Qt.ApplicationAttribute.AA_ShareOpenGLContexts)

    app = QApplication(list(argv))
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setStyle("Fusion")

    from gpxreplay.ui.main_window import MainWindow

    window = MainWindow()
    window.show()
    logging.getLogger(__name__).info("%s %s démarré", APP_NAME, APP_VERSION)
    return app.exec()


def main() -> int:
    return run(sys.argv)
