from typing import TypeVar

from app.schemas.travel import FilterCriteria, TravelOption

T = TypeVar("T", bound=TravelOption)


def matches(option: TravelOption, criteria: FilterCriteria) -> bool:
    """Price and rating bounds are inclusive."""
    return (
        criteria.min_price <= option.price <= criteria.max_price
        and option.rating >= criteria.min_rating
    )


def filter_options(options: list[T], criteria: FilterCriteria) -> list[T]:
    """Keep the options within the criteria bounds, preserving input order."""
    return [option for option in options if matches(option, criteria)]
