"""Tests for the WMM declination adapter (GeoMag mocked)."""

from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from gpxreplay.infra.geomag.wmm_declination import WmmDeclination, decimal_year

WHEN = datetime(2024, 7, 2, 12, 0, 0, tzinfo=timezone.utc)


def test_decimal_year_start_and_middle():
    assert decimal_year(datetime(2023, 1, 1, tzinfo=timezone.utc)) == pytest.approx(2023.0)
    assert decimal_year(WHEN) == pytest.approx(2024.5, abs=0.01)


def test_declination_calls_model_with_km_altitude():
    geo_mag = Mock()
    geo_mag.calculate.return_value = SimpleNamespace(d=-1.25)

    value = WmmDeclination(geo_mag).declination(55.87, -1.78, 3000.0, WHEN)

    assert value == pytest.approx(-1.25)
    kwargs = geo_mag.calculate.call_args.kwargs
    assert kwargs["glat"] == 55.87
    assert kwargs["glon"] == -1.78
    assert kwargs["alt"] == pytest.approx(3.0)
    assert kwargs["time"] == pytest.approx(decimal_year(WHEN))
    assert kwargs["allow_date_outside_lifespan"] is True


def test_declination_is_cached_for_nearby_queries():
    geo_mag = Mock()
    geo_mag.calculate.return_value = SimpleNamespace(d=2.0)
    model = WmmDeclination(geo_mag)

    model.declination(55.8701, -1.7801, 100.0, WHEN)
    model.declination(55.8702, -1.7802, 120.0, WHEN)
    assert geo_mag.calculate.call_count == 1

    model.declination(50.0, -1.78, 100.0, WHEN)
    assert geo_mag.calculate.call_count == 2
