import pytest

from modules.validation import filter_valid, validate_day_number, validate_place
from schemas.place import Place, PlaceCategory


def _record(**overrides):
    base = {"name": "Louvre", "type": "museum", "lat": 48.86, "lng": 2.33}
    base.update(overrides)
    return base


def test_valid_place():
    result = validate_place(_record())
    assert result
    assert result.errors == []


def test_valid_without_coordinates():
    assert validate_place(_record(lat=None, lng=None))


@pytest.mark.parametrize("legacy", ["food", "bar", "photo"])
def test_legacy_categories_accepted(legacy):
    assert validate_place(_record(type=legacy))


@pytest.mark.parametrize("overrides, fragment", [
    ({"name": "  "}, "name"),
    ({"type": "spa"}, "type="),
    ({"lat": 48.86, "lng": None}, "together"),
    ({"lat": None, "lng": 2.33}, "together"),
    ({"lat": 91.0}, "lat=91.0"),
    ({"lng": -180.5}, "lng=-180.5"),
    ({"lat": "north"}, "numeric"),
    ({"lat": float("nan")}, "lat=nan"),
])
def test_invalid_places(overrides, fragment):
    result = validate_place(_record(**overrides))
    assert not result
    assert any(fragment in e for e in result.errors)


@pytest.mark.parametrize("day, ok", [(1, True), (30, True), (0, False), (-2, False),
                                     (2.0, False), (True, False), (None, False)])
def test_validate_day_number(day, ok):
    assert bool(validate_day_number(day)) is ok


def test_filter_valid_splits_batch_in_order():
    rows = [
        _record(id="p1"),
        _record(id="p2", name=""),
        _record(id="p3", lat=None, lng=None),
        _record(id="p4", type="spa", lat=120.0),
    ]
    passed, rejected = filter_valid(rows)

    assert [r["id"] for r in passed] == ["p1", "p3"]
    assert [r.record["id"] for r in rejected] == ["p2", "p4"]
    assert len(rejected[1].errors) == 2


def test_filter_valid_with_converter_and_validator():
    places = [Place(id="a", name="Louvre"), Place(id="b", name=" ")]
    passed, rejected = filter_valid(places, to_dict=lambda p: p.to_dict())
    assert passed == [places[0]]
    assert rejected[0].record["id"] == "b"

    days, bad_days = filter_valid([1, 0, 3], validator=validate_day_number)
    assert days == [1, 3]
    assert bad_days[0].record == {"day": 0}


@pytest.mark.parametrize("raw, expected", [
    ("museum", PlaceCategory.MUSEUM),
    ("PHOTO-SPOT", PlaceCategory.PHOTO_SPOT),
    ("food", PlaceCategory.DINING),
    ("bar", PlaceCategory.NIGHTLIFE),
    ("photo", PlaceCategory.PHOTO_SPOT),
    ("spa", PlaceCategory.OTHER),
    (None, PlaceCategory.OTHER),
])
def test_category_parse(raw, expected):
    assert PlaceCategory.parse(raw) is expected


def test_place_from_row_keeps_fields():
    place = Place.from_row({
        "id": 7, "name": "Bar Hemingway", "type": "bar", "address": "15 Place Vendôme",
        "lat": None, "lng": None, "day_index": None, "notes": "book ahead",
    })
    assert place.id == "7"
    assert place.category is PlaceCategory.NIGHTLIFE
    assert place.is_unscheduled
    assert place.to_dict()["notes"] == "book ahead"
