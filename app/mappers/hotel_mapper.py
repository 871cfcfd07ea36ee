import logging
import math
import uuid

from app.catalog import IMAGE_HOTEL_CLASSIC
from app.schemas.travel import Hotel

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Hotel Name Not Available"
DEFAULT_RATING = 4.0
DEFAULT_CURRENCY = "USD"
DEFAULT_AMENITIES = ["WiFi", "Pool", "Gym"]
DEFAULT_DESCRIPTION = "Comfortable accommodation in {city}"
MAX_RATING = 5.0

# Ordered source keys per Hotel field; dotted keys walk nested objects/lists
ID_KEYS = ("id", "hotelId")
NAME_KEYS = ("name", "hotelName")
RATING_KEYS = ("rating", "starRating")
PRICE_KEYS = ("price.amount", "totalPrice", "pricePerNight", "price")
CURRENCY_KEYS = ("price.currency", "currency")
IMAGE_KEYS = ("image", "photos.0")
LOCATION_KEYS = ("address", "location")
REVIEW_KEYS = ("reviews", "reviewCount", "numReviews")

# Where the hotel list may sit in an upstream body
LIST_KEYS = ("hotels", "data", "results")


def _lookup(raw: dict, path: str):
    value = raw
    for part in path.split("."):
        if isinstance(value, dict):
            value = value.get(part)
        elif isinstance(value, list) and part.isdigit():
            index = int(part)
            value = value[index] if index < len(value) else None
        else:
            return None
        if value is None:
            return None
    return value


def _to_float(value) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def first_text(raw: dict, keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = _lookup(raw, key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def first_id(raw: dict) -> str | None:
    """Upstream ids may be strings or integers."""
    for key in ID_KEYS:
        value = _lookup(raw, key)
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def text_list(value, default: list[str]) -> list[str]:
    if not isinstance(value, list):
        return list(default)
    items = [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return items or list(default)


def first_positive_number(raw: dict, keys: tuple[str, ...]) -> float | None:
    """First value under ``keys`` that parses to a number greater than zero."""
    for key in keys:
        number = _to_float(_lookup(raw, key))
        if number is not None and number > 0:
            return number
    return None


def extract_hotel_list(data) -> list:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in LIST_KEYS:
            value = data.get(key)
            if isinstance(value, list):
                return value
    return []


def normalize_hotel(raw: dict, city: str) -> Hotel:
    """Map one upstream hotel record of unknown shape onto Hotel."""
    rating = first_positive_number(raw, RATING_KEYS)
    reviews = first_positive_number(raw, REVIEW_KEYS)

    return Hotel(
        id=first_id(raw) or f"hotel-{uuid.uuid4().hex[:9]}",
        name=first_text(raw, NAME_KEYS) or DEFAULT_NAME,
        rating=min(rating, MAX_RATING) if rating is not None else DEFAULT_RATING,
        reviews=int(reviews) if reviews is not None else 0,
        price=first_positive_number(raw, PRICE_KEYS) or 0.0,
        currency=first_text(raw, CURRENCY_KEYS) or DEFAULT_CURRENCY,
        image=first_text(raw, IMAGE_KEYS) or IMAGE_HOTEL_CLASSIC,
        location=first_text(raw, LOCATION_KEYS) or city,
        amenities=text_list(raw.get("amenities"), DEFAULT_AMENITIES),
        description=first_text(raw, ("description",)) or DEFAULT_DESCRIPTION.format(city=city),
        availability=raw.get("availability") is not False,
    )


def normalize_hotels(data, city: str) -> list[Hotel]:
    hotels = []
    for raw in extract_hotel_list(data):
        if not isinstance(raw, dict):
            logger.warning("Skipping non-object hotel record for %s: %r", city, raw)
            continue
        hotels.append(normalize_hotel(raw, city))
    return hotels
