#!/usr/bin/env python
# -*- coding: utf-8 -*-

import html
import json
from typing import Dict, List, Optional, Sequence

import folium

from gpxreplay.app.config import DEFAULT_BOUNDS, METERS_TO_FEET
from gpxreplay.core.models.playback_models import NOT_STARTED, IndexMap
from gpxreplay.domain.geo import true_bearing
from gpxreplay.domain.gps_types import CustomMarker, Track

PLANE_SVG = (
    "<svg width='28' height='28' viewBox='0 0 24 24'>"
    "<path d='M12 2 L15 10 L22 13 L22 15 L15 13.5 L14 19 L16.5 21 L16.5 22 L12 21 L7.5 22 "
    "L7.5 21 L10 19 L9 13.5 L2 15 L2 13 L9 10 Z' fill='{color}' stroke='#FFFFFF' stroke-width='1'/>"
    "</svg>"
)

MAP_STYLE = """
<style>
    html, body { width: 100%; height: 100%; margin: 0; padding: 0; background: #1e1e1e; }
    .plane-icon-wrapper { width: 28px; height: 28px; transform-origin: center; transition: transform 0.1s linear; }
    .leaflet-popup-content-wrapper, .leaflet-popup-tip {
        background: rgba(30, 30, 30, 0.85);
        color: #E0E0E0;
        box-shadow: 0 4px 16px rgba(0,0,0,0.5);
        border: 1px solid rgba(255,255,255,0.1);
    }
    .leaflet-container a.leaflet-popup-close-button { color: #E0E0E0; }
</style>
"""

# Fonctions appelées depuis Python via runJavaScript
MAP_SCRIPT = """
var trackMarkers = {};
var customMarkers = [];

function gpxMap() {
    return %(map_name)s;
}

function planeIcon(color, rotation) {
    var svg = "%(plane_svg)s".replace('{color}', color);
    return L.divIcon({
        className: '',
        html: "<div class='plane-icon-wrapper' style='transform: rotate(" + rotation + "deg);'>" + svg + "</div>",
        iconSize: [28, 28],
        iconAnchor: [14, 14]
    });
}

function updatePositions(positions) {
    var map = gpxMap();
    var seen = {};
    positions.forEach(function(p) {
        seen[p.id] = true;
        var marker = trackMarkers[p.id];
        if (!marker) {
            marker = L.marker([p.lat, p.lon], {icon: planeIcon(p.color, p.rotation), zIndexOffset: 1000});
            marker.bindPopup(p.popup);
            marker.addTo(map);
            trackMarkers[p.id] = marker;
        }
        marker.setLatLng([p.lat, p.lon]);
        marker.setPopupContent(p.popup);
        var el = marker.getElement();
        if (el) {
            var wrapper = el.querySelector('.plane-icon-wrapper');
            if (wrapper) {
                wrapper.style.transform = 'rotate(' + p.rotation + 'deg)';
            }
        }
    });
    // Traces pas encore démarrées: pas d'avion
    Object.keys(trackMarkers).forEach(function(id) {
        if (!seen[id]) {
            map.removeLayer(trackMarkers[id]);
            delete trackMarkers[id];
        }
    });
}

function setCustomMarkers(markers) {
    var map = gpxMap();
    customMarkers.forEach(function(m) { map.removeLayer(m); });
    customMarkers = markers.map(function(m) {
        return L.marker([m.lat, m.lon])
            .bindPopup(m.popup, {maxWidth: 250})
            .bindTooltip(m.name)
            .addTo(map);
    });
}

window.addEventListener('load', function() {
    setCustomMarkers(%(markers)s);
    gpxMap().on('click', function(e) {
        console.log("MAPCLICK:" + e.latlng.lat.toFixed(6) + "," + e.latlng.lng.toFixed(6));
    });
    console.log("READY");
});
"""


def compute_fit_bounds(tracks: Sequence[Track], markers: Sequence[CustomMarker]) -> List[List[float]]:
    """Emprise à afficher: traces, sinon marqueurs, sinon Royaume-Uni."""
    lats: List[float] = []
    lons: List[float] = []
    for track in tracks:
        if track.is_empty():
            continue
        min_lat, min_lon, max_lat, max_lon = track.get_bounds()
        lats += [min_lat, max_lat]
        lons += [min_lon, max_lon]

    if not lats:
        lats = [m.latitude for m in markers]
        lons = [m.longitude for m in markers]

    if not lats:
        (south, west), (north, east) = DEFAULT_BOUNDS
        return [[south, west], [north, east]]
    return [[min(lats), min(lons)], [max(lats), max(lons)]]


def build_position_payload(tracks: Sequence[Track], indices: IndexMap) -> List[Dict]:
    """Position, orientation et popup de l'avion de chaque trace démarrée."""
    payload: List[Dict] = []
    for track in tracks:
        index = indices.get(track.id, NOT_STARTED)
        if index == NOT_STARTED or not 0 <= index < len(track.points):
            continue
        point = track.points[index]

        rotation = 0.0
        if index > 0:
            prev = track.points[index - 1]
            rotation = true_bearing(prev.latitude, prev.longitude, point.latitude, point.longitude)

        popup = (
            f"<b>{html.escape(track.name)}</b><br/>"
            f"Altitude: {point.elevation * METERS_TO_FEET:.2f} ft<br/>"
            f"Heure: {point.timestamp.isoformat()}"
        )
        payload.append({
            "id": track.id,
            "lat": point.latitude,
            "lon": point.longitude,
            "rotation": round(rotation, 2),
            "color": track.color,
            "popup": popup,
        })
    return payload


def build_marker_payload(markers: Sequence[CustomMarker]) -> List[Dict]:
    """Position, libellé et popup de chaque marqueur personnalisé."""
    payload: List[Dict] = []
    for marker in markers:
        # Le script est rendu par Jinja
        name = html.escape(marker.name).replace("{", "&#123;").replace("}", "&#125;")
        payload.append({
            "id": marker.id,
            "lat": marker.latitude,
            "lon": marker.longitude,
            "name": name,
            "popup": (
                f"<b>{name}</b><br/>"
                f"Lat: {marker.latitude:.4f}<br/>"
                f"Lng: {marker.longitude:.4f}"
            ),
        })
    return payload


def markers_to_js(markers: Sequence[CustomMarker]) -> str:
    """Argument JS de setCustomMarkers (sans séquence </ dans le script)."""
    return json.dumps(build_marker_payload(markers)).replace("</", "<\\/")


class MapHTMLGenerator:
    """Générateur de code HTML pour la carte Folium/Leaflet."""

    @staticmethod
    def build_map(
        tracks: Optional[Sequence[Track]] = None,
        markers: Optional[Sequence[CustomMarker]] = None,
    ) -> folium.Map:
        tracks = tracks or []
        markers = markers or []

        bounds = compute_fit_bounds(tracks, markers)
        center = [(bounds[0][0] + bounds[1][0]) / 2, (bounds[0][1] + bounds[1][1]) / 2]

        fmap = folium.Map(location=center, zoom_start=6, tiles="CartoDB dark_matter", control_scale=True)

        for track in tracks:
            if track.is_empty():
                continue
            coords = [(p.latitude, p.longitude) for p in track.points]
            folium.PolyLine(
                coords,
                color=track.color,
                weight=3,
                opacity=0.8,
                tooltip=track.name,
            ).add_to(fmap)

        fmap.fit_bounds(bounds)

        root = fmap.get_root()
        root.header.add_child(folium.Element(MAP_STYLE))
        root.script.add_child(folium.Element(MAP_SCRIPT % {
            "map_name": fmap.get_name(),
            "plane_svg": PLANE_SVG.replace('"', '\\"'),
            "markers": markers_to_js(markers),
        }))
        return fmap

    @staticmethod
    def generate(
        tracks: Optional[Sequence[Track]] = None,
        markers: Optional[Sequence[CustomMarker]] = None,
    ) -> str:
        """Crée le code HTML complet de la carte (Dark Mode)."""
        return MapHTMLGenerator.build_map(tracks, markers).get_root().render()
