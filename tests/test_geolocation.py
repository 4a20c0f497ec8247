from __future__ import annotations

import pytest

from src.fieldforce.fieldforce.core.exceptions import LocationUnavailableError
from src.fieldforce.fieldforce.location.geolocation import GeolocationOptions, parse_fix
from src.fieldforce.fieldforce.location.model import GeoPoint


def test_parse_fix_accepts_short_and_long_keys():
    assert parse_fix({"lat": 12.9, "lng": 77.5}) == GeoPoint(12.9, 77.5)
    assert parse_fix({"latitude": "12.9", "longitude": "77.5"}) == GeoPoint(12.9, 77.5)


def test_real_zero_coordinate_is_accepted():
    assert parse_fix({"lat": 0, "lng": 0}) == GeoPoint(0.0, 0.0)


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {},
        {"error": "User denied Geolocation"},
        {"lat": 0, "lng": 0, "error": "Timeout expired"},
        {"lat": 12.9},
        {"lat": "north", "lng": 77.5},
        {"lat": 91, "lng": 77.5},
        {"lat": 12.9, "lng": -181},
        [12.9, 77.5],
        "12.9,77.5",
    ],
)
def test_failed_fix_never_becomes_a_coordinate(payload):
    with pytest.raises(LocationUnavailableError):
        parse_fix(payload)


def test_default_browser_options():
    assert GeolocationOptions().as_browser_options() == {
        "enableHighAccuracy": True,
        "timeout": 10000,
        "maximumAge": 0,
    }
