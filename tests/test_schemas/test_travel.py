import pytest
from pydantic import ValidationError

from app.schemas.travel import Hotel, Restaurant, TripRequest


def test_trip_request_accepts_city_alias_and_numeric_string():
    request = TripRequest(city="  Tokyo ", budget="$100/day", days="3")

    assert request.destination == "Tokyo"
    assert request.days == 3
    assert request.traveler_type is None


@pytest.mark.parametrize("field", ["destination", "budget"])
def test_trip_request_rejects_blank_fields(field):
    data = {"destination": "Tokyo", "budget": "$100/day", "days": 3, field: "   "}

    with pytest.raises(ValidationError):
        TripRequest(**data)


@pytest.mark.parametrize("days", [0, -1, 31])
def test_trip_request_bounds_days(days):
    with pytest.raises(ValidationError):
        TripRequest(destination="Tokyo", budget="$100/day", days=days)


def test_hotel_rejects_out_of_range_values():
    with pytest.raises(ValidationError):
        Hotel(id="h", name="H", price=-1, rating=4)
    with pytest.raises(ValidationError):
        Hotel(id="h", name="H", price=10, rating=5.1)


def test_options_are_immutable():
    hotel = Hotel(id="h", name="H", price=10, rating=4)

    with pytest.raises(ValidationError):
        hotel.price = 20


def test_restaurant_price_and_tags():
    restaurant = Restaurant(
        id="r", name="R", cuisine="Local", price_range="$$",
        average_price=25, rating=4.5, specialties=["Local wine"],
    )

    assert restaurant.price == 25
    assert restaurant.tags == ["Local wine"]
