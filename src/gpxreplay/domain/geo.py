#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Calculs géodésiques simples (sphère de rayon 6371 km).
"""

from math import radians, degrees, sin, cos, sqrt, atan2

EARTH_RADIUS_KM: float = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance haversine en km entre deux points GPS."""
    phi1, phi2 = radians(lat1), radians(lat2)
    dphi = radians(lat2 - lat1)
    dlambda = radians(lon2 - lon1)
    h = sin(dphi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(dlambda / 2) ** 2
    c = 2 * atan2(sqrt(h), sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def true_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Relèvement vrai initial du point 1 vers le point 2.

    Returns:
        Angle en degrés dans [0, 360), 0 = Nord, sens horaire
    """
    phi1, phi2 = radians(lat1), radians(lat2)
    dlambda = radians(lon2 - lon1)
    y = sin(dlambda) * cos(phi2)
    x = cos(phi1) * sin(phi2) - sin(phi1) * cos(phi2) * cos(dlambda)
    return (degrees(atan2(y, x)) + 360) % 360


def magnetic_bearing(true_bearing_deg: float, declination_deg: float) -> float:
    """Convertit un relèvement vrai en relèvement magnétique."""
    return (true_bearing_deg - declination_deg + 360) % 360
