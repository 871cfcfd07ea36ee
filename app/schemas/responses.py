from pydantic import BaseModel

from app.schemas.travel import Hotel, Restaurant, Transportation


class HotelQueryResult(BaseModel):
    success: bool
    hotels: list[Hotel] = []
    city: str = ""
    total_results: int = 0
    error: str | None = None
    fallback: bool = False  # hotels are curated substitutes, not live prices


class ItineraryResult(BaseModel):
    success: bool
    itinerary: str | None = None
    error: str | None = None
    provider: str | None = None


class RestaurantListResponse(BaseModel):
    city: str
    total_results: int
    restaurants: list[Restaurant]


class TransportationListResponse(BaseModel):
    city: str
    total_results: int
    transportation: list[Transportation]


class OptionFilterResponse(BaseModel):
    hotels: list[Hotel] = []
    restaurants: list[Restaurant] = []
    transportation: list[Transportation] = []


class HealthResponse(BaseModel):
    status: str
    message: str
