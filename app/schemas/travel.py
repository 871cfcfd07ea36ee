from enum import StrEnum
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

MAX_TRIP_DAYS = 30
DEFAULT_MIN_PRICE = 0.0
DEFAULT_MAX_PRICE = 10000.0


class OptionCategory(StrEnum):
    accommodation = "accommodation"
    transportation = "transportation"
    restaurants = "restaurants"


class TravelOption(BaseModel):
    """Fields shared by every bookable option.

    Subclasses expose ``price`` (the number the filter compares against)
    and ``tags`` (their capability list) so that filtering does not care
    where an option came from.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    rating: float = Field(ge=0, le=5)
    reviews: int = Field(default=0, ge=0)
    location: str = ""


class Hotel(TravelOption):
    price: float = Field(ge=0)
    currency: str = "USD"
    image: str = ""
    amenities: list[str] = []
    description: str = ""
    availability: bool = True

    @property
    def tags(self) -> list[str]:
        return self.amenities


class Restaurant(TravelOption):
    cuisine: str
    price_range: Literal["$", "$$", "$$$"]
    average_price: float = Field(ge=0)
    open_hours: str = ""
    specialties: list[str] = []
    image: str = ""

    @property
    def price(self) -> float:
        return self.average_price

    @property
    def tags(self) -> list[str]:
        return self.specialties


class Transportation(TravelOption):
    type: Literal["taxi", "rideshare", "local", "rental"]
    base_price: float = Field(ge=0)
    per_km_price: float = Field(default=0, ge=0)
    capacity: int = Field(ge=1)
    estimated_wait_time: str = ""

    @property
    def price(self) -> float:
        return self.base_price

    @property
    def tags(self) -> list[str]:
        return [self.type]


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_price: float = Field(default=DEFAULT_MIN_PRICE, ge=0)
    max_price: float = Field(default=DEFAULT_MAX_PRICE, ge=0)
    min_rating: float = Field(default=0, ge=0, le=5)
    category: OptionCategory | None = None

    @model_validator(mode="after")
    def _check_price_range(self) -> "FilterCriteria":
        if self.min_price > self.max_price:
            raise ValueError("min_price must not exceed max_price")
        return self


class TripRequest(BaseModel):
    destination: str = Field(validation_alias=AliasChoices("destination", "city"))
    budget: str
    days: int = Field(ge=1, le=MAX_TRIP_DAYS)
    traveler_type: str | None = Field(
        default=None, validation_alias=AliasChoices("traveler_type", "travelerType")
    )
    preferences: str | None = None

    @field_validator("destination", "budget")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value
