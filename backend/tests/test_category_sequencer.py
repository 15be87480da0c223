import random

from modules.planning.category_sequencer import (
    CATEGORY_PRIORITY,
    category_priority,
    sequence_places,
)
from schemas.place import PlaceCategory
from tests.conftest import make_place


def test_priority_order():
    ordered = sorted(PlaceCategory, key=category_priority)
    assert ordered == [
        PlaceCategory.MUSEUM,
        PlaceCategory.ACTIVITY,
        PlaceCategory.PHOTO_SPOT,
        PlaceCategory.DINING,
        PlaceCategory.CAFE,
        PlaceCategory.NIGHTLIFE,
        PlaceCategory.OTHER,
    ]
    assert set(CATEGORY_PRIORITY) == set(PlaceCategory)


def test_sorts_by_category():
    bar = make_place(PlaceCategory.NIGHTLIFE)
    museum = make_place(PlaceCategory.MUSEUM)
    food = make_place(PlaceCategory.DINING)
    assert sequence_places([bar, food, museum]) == [museum, food, bar]


def test_equal_priority_keeps_input_order():
    first = make_place(PlaceCategory.CAFE, name="first")
    second = make_place(PlaceCategory.CAFE, name="second")
    museum = make_place(PlaceCategory.MUSEUM)
    third = make_place(PlaceCategory.CAFE, name="third")
    assert sequence_places([first, second, museum, third]) == [museum, first, second, third]


def test_does_not_mutate_input():
    places = [make_place(PlaceCategory.OTHER), make_place(PlaceCategory.MUSEUM)]
    before = list(places)
    sequence_places(places)
    assert places == before


def test_museum_never_after_nightlife_in_any_shuffle():
    rng = random.Random(7)
    places = [make_place(rng.choice(list(PlaceCategory))) for _ in range(30)]
    for _ in range(50):
        rng.shuffle(places)
        ordered = sequence_places(places)
        cats = [p.category for p in ordered]
        if PlaceCategory.MUSEUM in cats and PlaceCategory.NIGHTLIFE in cats:
            last_museum = max(i for i, c in enumerate(cats) if c is PlaceCategory.MUSEUM)
            first_bar = cats.index(PlaceCategory.NIGHTLIFE)
            assert last_museum < first_bar
