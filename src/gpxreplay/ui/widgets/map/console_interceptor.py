#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from PyQt6.QtWebEngineCore import QWebEnginePage

logger = logging.getLogger(__name__)


def parse_map_click(payload: str):
    """'lat,lon' -> (lat, lon) ou None si illisible."""
    try:
        lat_text, lon_text = payload.split(",", 1)
        return float(lat_text), float(lon_text)
    except ValueError:
        return None


class ConsoleInterceptor(QWebEnginePage):
    """Intercepte les messages console JS pour la communication."""

    def __init__(self, parent_widget):
        super().__init__(parent_widget)
        self.parent_widget = parent_widget

    def javaScriptConsoleMessage(self, level, message, line, source_id):
        # Page prête: les positions peuvent être poussées
        if message == "READY":
            self.parent_widget.on_map_ready()
            return

        # Interception du clic carte
        if message.startswith("MAPCLICK:"):
            coords = parse_map_click(message[9:])
            if coords is not None:
                self.parent_widget.map_clicked.emit(coords[0], coords[1])
            return

        logger.debug("JS console (%s:%d): %s", source_id, line, message)
