#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Profil d'altitude pour GPX Replay.
Altitude (m) en fonction de la distance cumulée (km), une courbe par trace,
avec un indicateur pointillé à la position courante de chaque trace.
"""

from typing import Dict, List, Optional, Sequence

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPainter, QPainterPath, QPen
from PyQt6.QtWidgets import (
    QGraphicsLineItem, QGraphicsPathItem, QGraphicsScene, QGraphicsTextItem,
    QGraphicsView, QVBoxLayout, QWidget
)

from gpxreplay.core.models.playback_models import NOT_STARTED, IndexMap
from gpxreplay.core.usecases.elevation_profile import ElevationProfile, build_profiles, profile_extent
from gpxreplay.domain.gps_types import Track

# Constantes de style
COLOR_CHART_BG = QColor("#121212")
COLOR_AXIS = QColor("#555555")
COLOR_AXIS_TEXT = QColor("#808080")
COLOR_GRID = QColor("#262626")

MARGIN_LEFT = 52
MARGIN_RIGHT = 16
MARGIN_TOP = 14
MARGIN_BOTTOM = 28
X_TICKS = 5
Y_TICKS = 4


class ElevationWidget(QWidget):
    """Graphique altitude / distance alimenté par les snapshots."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.profiles: List[ElevationProfile] = []
        self.indices: IndexMap = {}
        self._indicators: Dict[int, QGraphicsLineItem] = {}

        self.scene = QGraphicsScene(self)
        self.scene.setBackgroundBrush(QBrush(COLOR_CHART_BG))
        self.view = QGraphicsView(self.scene)
        self.view.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.view.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.view.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.view.setFrameShape(QGraphicsView.Shape.NoFrame)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.view)

        self._rebuild_scene()

    def set_tracks(self, tracks: Sequence[Track]) -> None:
        """Recalcule les profils et redessine."""
        self.profiles = build_profiles(tracks)
        self._rebuild_scene()

    def update_indices(self, indices: IndexMap) -> None:
        """Déplace les indicateurs sans reconstruire la scène."""
        self.indices = dict(indices)
        self._apply_indicators()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._rebuild_scene()

    def _chart_size(self):
        width = max(200, self.view.viewport().width() or self.width() or 600)
        height = max(120, self.view.viewport().height() or self.height() or 180)
        return width, height

    def _rebuild_scene(self) -> None:
        """Reconstruit la scène graphique."""
        self.scene.clear()
        self._indicators.clear()

        width, height = self._chart_size()
        self.scene.setSceneRect(0, 0, width, height)

        extent = profile_extent(self.profiles)
        if extent is None:
            text = QGraphicsTextItem("Aucune trace chargée")
            text.setDefaultTextColor(COLOR_AXIS_TEXT)
            text.setFont(QFont("Segoe UI", 9))
            text.setPos(width / 2 - 60, height / 2 - 10)
            self.scene.addItem(text)
            return

        max_distance, min_elevation, max_elevation = extent
        self._max_distance = max_distance if max_distance > 0 else 1.0
        self._min_elevation = min_elevation
        self._elevation_span = (max_elevation - min_elevation) or 1.0
        self._plot_w = width - MARGIN_LEFT - MARGIN_RIGHT
        self._plot_h = height - MARGIN_TOP - MARGIN_BOTTOM

        self._draw_axes(max_distance, min_elevation, max_elevation)

        for profile in self.profiles:
            path = QPainterPath()
            for i, (d, e) in enumerate(zip(profile.distances_km, profile.elevations_m)):
                pt = self._to_scene(d, e)
                if i == 0:
                    path.moveTo(pt)
                else:
                    path.lineTo(pt)
            item = QGraphicsPathItem(path)
            item.setPen(QPen(QColor(profile.color), 1.5))
            item.setZValue(10)
            self.scene.addItem(item)

            indicator = QGraphicsLineItem()
            pen = QPen(QColor(profile.color), 1)
            pen.setStyle(Qt.PenStyle.DashLine)
            indicator.setPen(pen)
            indicator.setZValue(20)
            indicator.setVisible(False)
            self.scene.addItem(indicator)
            self._indicators[profile.track_id] = indicator

        self._apply_indicators()

    def _draw_axes(self, max_distance: float, min_elevation: float, max_elevation: float) -> None:
        left, top = MARGIN_LEFT, MARGIN_TOP
        bottom = top + self._plot_h
        right = left + self._plot_w

        self.scene.addLine(left, bottom, right, bottom, QPen(COLOR_AXIS))
        self.scene.addLine(left, top, left, bottom, QPen(COLOR_AXIS))

        font = QFont("Segoe UI", 8)
        for i in range(X_TICKS + 1):
            d = max_distance * i / X_TICKS
            x = left + self._plot_w * i / X_TICKS
            self.scene.addLine(x, bottom, x, bottom + 4, QPen(COLOR_AXIS))
            label = QGraphicsTextItem(f"{d:.1f}")
            label.setDefaultTextColor(COLOR_AXIS_TEXT)
            label.setFont(font)
            label.setPos(x - 12, bottom + 4)
            self.scene.addItem(label)

        for i in range(Y_TICKS + 1):
            e = min_elevation + (max_elevation - min_elevation) * i / Y_TICKS
            y = bottom - self._plot_h * i / Y_TICKS
            if i > 0:
                self.scene.addLine(left, y, right, y, QPen(COLOR_GRID))
            label = QGraphicsTextItem(f"{e:.0f}")
            label.setDefaultTextColor(COLOR_AXIS_TEXT)
            label.setFont(font)
            label.setPos(4, y - 10)
            self.scene.addItem(label)

        unit = QGraphicsTextItem("km")
        unit.setDefaultTextColor(COLOR_AXIS_TEXT)
        unit.setFont(font)
        unit.setPos(right - 18, top - 12)
        self.scene.addItem(unit)

    def _to_scene(self, distance_km: float, elevation_m: float) -> QPointF:
        x = MARGIN_LEFT + self._plot_w * distance_km / self._max_distance
        y = MARGIN_TOP + self._plot_h * (1 - (elevation_m - self._min_elevation) / self._elevation_span)
        return QPointF(x, y)

    def _apply_indicators(self) -> None:
        """Replace les indicateurs après un snapshot ou un rebuild."""
        profiles = {p.track_id: p for p in self.profiles}
        for track_id, indicator in self._indicators.items():
            index = self.indices.get(track_id, NOT_STARTED)
            point = profiles[track_id].point_at(index) if index != NOT_STARTED else None
            if point is None:
                indicator.setVisible(False)
                continue
            x = self._to_scene(point[0], point[1]).x()
            indicator.setLine(x, MARGIN_TOP, x, MARGIN_TOP + self._plot_h)
            indicator.setVisible(True)
