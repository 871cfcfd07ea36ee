import logging
import re

from app.catalog import DESTINATIONS, GENERIC_HOTELS, RESTAURANTS, TRANSPORTATION
from app.schemas.travel import Hotel, OptionCategory, Restaurant, Transportation, TravelOption

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_city(city: str) -> str:
    """Trim and casefold a free-text city name."""
    return city.strip().casefold()


def city_slug(city: str) -> str:
    return _WHITESPACE_RE.sub("-", normalize_city(city))


def display_city(city: str) -> str:
    """Capitalize the first letter and lowercase the rest, e.g. "ZANZIBAR" -> "Zanzibar"."""
    return _WHITESPACE_RE.sub(" ", city.strip()).capitalize()


class DestinationResolver:
    """Curated travel options for a city, used when no live data is available.

    Every method is pure and total: a non-blank city always yields records,
    and the same normalized city always yields the same records.
    """

    def __init__(self, destinations: list[tuple[str, tuple[str, ...], list[dict]]] = DESTINATIONS):
        self._destinations = destinations

    def _match(self, normalized: str) -> tuple[str, list[dict]] | None:
        for name, aliases, hotels in self._destinations:
            if any(alias in normalized for alias in aliases):
                return name, hotels
        return None

    def _place(self, city: str) -> tuple[str, str]:
        """Return (display name, id prefix) for a non-blank city."""
        match = self._match(normalize_city(city))
        if match is not None:
            name, _ = match
            return name, city_slug(name)
        return display_city(city), city_slug(city)

    def resolve(self, city: str) -> list[Hotel]:
        normalized = normalize_city(city)
        if not normalized:
            return []

        match = self._match(normalized)
        if match is not None:
            name, hotels = match
            logger.debug("Curated hotels for %s matched %s", city, name)
            return [Hotel(**record) for record in hotels]

        name = display_city(city)
        slug = city_slug(city)
        logger.debug("No curated hotels for %s, using generic set", city)
        return [
            Hotel(
                **{
                    **record,
                    "id": f"{slug}-fallback-{i}",
                    "name": record["name"].format(city=name),
                    "location": record["location"].format(city=name),
                    "description": record["description"].format(city=name),
                }
            )
            for i, record in enumerate(GENERIC_HOTELS, start=1)
        ]

    def resolve_restaurants(self, city: str) -> list[Restaurant]:
        if not normalize_city(city):
            return []
        name, slug = self._place(city)
        return [
            Restaurant(
                **{
                    **record,
                    "id": f"{slug}-restaurant-{i}",
                    "location": record["location"].format(city=name),
                }
            )
            for i, record in enumerate(RESTAURANTS, start=1)
        ]

    def resolve_transportation(self, city: str) -> list[Transportation]:
        if not normalize_city(city):
            return []
        name, slug = self._place(city)
        return [
            Transportation(**record, id=f"{slug}-transport-{i}", location=name)
            for i, record in enumerate(TRANSPORTATION, start=1)
        ]

    def resolve_category(self, city: str, category: OptionCategory) -> list[TravelOption]:
        if category == OptionCategory.accommodation:
            return self.resolve(city)
        if category == OptionCategory.restaurants:
            return self.resolve_restaurants(city)
        return self.resolve_transportation(city)
