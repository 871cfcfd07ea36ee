import pytest
from pydantic import ValidationError

from app.mappers.option_filter import filter_options
from app.schemas.travel import FilterCriteria, Hotel, Restaurant, Transportation


def _hotel(id: str, price: float, rating: float) -> Hotel:
    return Hotel(id=id, name=f"Hotel {id}", price=price, rating=rating)


@pytest.fixture
def hotels():
    return [
        _hotel("a", 4500, 4.3),
        _hotel("b", 5000, 3.9),
        _hotel("c", 120, 4.8),
        _hotel("d", 5000, 4.0),
        _hotel("e", 25000, 4.4),
    ]


def test_default_bounds_keep_everything_in_order(hotels):
    criteria = FilterCriteria(min_price=0, max_price=100000, min_rating=0)

    result = filter_options(hotels, criteria)

    assert result == hotels


def test_wide_slider_range_keeps_all_within_range(hotels):
    result = filter_options(hotels, FilterCriteria(min_price=0, max_price=10000, min_rating=0))

    assert [h.id for h in result] == ["a", "b", "c", "d"]


def test_exact_price_bounds(hotels):
    result = filter_options(hotels, FilterCriteria(min_price=5000, max_price=5000, min_rating=0))

    assert [h.id for h in result] == ["b", "d"]
    assert all(h.price == 5000 for h in result)


def test_rating_threshold_is_inclusive(hotels):
    result = filter_options(hotels, FilterCriteria(min_rating=4.0, max_price=100000))

    ids = [h.id for h in result]
    assert "d" in ids  # exactly 4.0
    assert "b" not in ids  # 3.9


def test_empty_input():
    assert filter_options([], FilterCriteria()) == []


def test_does_not_mutate_input(hotels):
    before = list(hotels)

    filter_options(hotels, FilterCriteria(min_price=1000, max_price=2000))

    assert hotels == before


def test_restaurants_filter_on_average_price():
    restaurants = [
        Restaurant(id="r1", name="Cheap", cuisine="Cafe", price_range="$", average_price=8, rating=4.2),
        Restaurant(id="r2", name="Fancy", cuisine="French", price_range="$$$", average_price=75, rating=4.7),
    ]

    result = filter_options(restaurants, FilterCriteria(min_price=10, max_price=100))

    assert [r.id for r in result] == ["r2"]


def test_transportation_filter_on_base_price():
    options = [
        Transportation(id="t1", name="Taxi", type="taxi", base_price=5, per_km_price=2, rating=4.0, capacity=4),
        Transportation(id="t2", name="Rental", type="rental", base_price=35, rating=4.2, capacity=5),
    ]

    result = filter_options(options, FilterCriteria(max_price=10))

    assert [t.id for t in result] == ["t1"]


def test_criteria_rejects_inverted_price_range():
    with pytest.raises(ValidationError):
        FilterCriteria(min_price=500, max_price=100)


def test_criteria_rejects_rating_above_five():
    with pytest.raises(ValidationError):
        FilterCriteria(min_rating=5.5)
