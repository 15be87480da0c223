import math

import pytest

from modules.tool_usage.distance_tool import DistanceTool, haversine_km
from schemas.place import PlaceCategory
from tests.conftest import make_place

EIFFEL = (48.8584, 2.2945)
LOUVRE = (48.8606, 2.3376)
VERSAILLES = (48.8049, 2.1204)


def test_identical_points_are_zero():
    assert haversine_km(*EIFFEL, *EIFFEL) == 0.0


@pytest.mark.parametrize("a, b", [
    (EIFFEL, LOUVRE),
    (EIFFEL, VERSAILLES),
    ((0.0, 179.9), (0.0, -179.9)),
    ((-33.8568, 151.2153), (51.5007, -0.1246)),
])
def test_distance_is_symmetric(a, b):
    assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a), abs=1e-9)


def test_known_distances():
    assert haversine_km(*EIFFEL, *LOUVRE) == pytest.approx(3.2, abs=0.1)
    assert haversine_km(*EIFFEL, *VERSAILLES) == pytest.approx(14.1, abs=0.3)
    # one degree of latitude on a 6371 km sphere
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(6371 * math.pi / 180, rel=1e-9)


def test_antimeridian_is_short_way_round():
    assert haversine_km(0.0, 179.9, 0.0, -179.9) == pytest.approx(22.24, abs=0.01)


def test_travel_time_uses_speed():
    tool = DistanceTool(speed_kmh=30.0)
    a = make_place(lat=0.0, lng=0.0)
    b = make_place(lat=1.0, lng=0.0)
    assert tool.travel_time_hours(a, b) == pytest.approx(tool.distance_km(a, b) / 30.0)


def test_travel_time_defaults_without_coordinates():
    tool = DistanceTool(default_travel_hours=0.5)
    located = make_place(PlaceCategory.MUSEUM, lat=48.86, lng=2.33)
    unlocated = make_place(PlaceCategory.CAFE)
    assert tool.travel_time_hours(located, unlocated) == 0.5
    assert tool.travel_time_hours(unlocated, located) == 0.5
    assert tool.travel_time_hours(unlocated, unlocated) == 0.5


def test_defaults_come_from_config(monkeypatch):
    import config
    monkeypatch.setattr(config, "SUGGEST_TRAVEL_SPEED_KMH", 15.0)
    monkeypatch.setattr(config, "SUGGEST_DEFAULT_TRAVEL_HOURS", 0.25)
    tool = DistanceTool()
    assert tool.speed_kmh == 15.0
    assert tool.default_travel_hours == 0.25


def test_distance_requires_coordinates():
    with pytest.raises(ValueError):
        DistanceTool().distance_km(make_place(lat=1.0, lng=1.0), make_place())


def test_rejects_non_positive_speed():
    with pytest.raises(ValueError):
        DistanceTool(speed_kmh=0)
