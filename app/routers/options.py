from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import FilterCriteriaDep, ResolverDep
from app.mappers.option_filter import filter_options
from app.schemas.responses import (
    OptionFilterResponse,
    RestaurantListResponse,
    TransportationListResponse,
)
from app.schemas.travel import FilterCriteria, Hotel, OptionCategory, Restaurant, Transportation

router = APIRouter(prefix="/api")


class OptionFilterRequest(BaseModel):
    criteria: FilterCriteria = FilterCriteria()
    hotels: list[Hotel] = []
    restaurants: list[Restaurant] = []
    transportation: list[Transportation] = []


@router.get("/restaurants", response_model=RestaurantListResponse)
async def list_restaurants(
    resolver: ResolverDep,
    criteria: FilterCriteriaDep,
    city: str = "",
) -> RestaurantListResponse:
    restaurants = filter_options(resolver.resolve_restaurants(city), criteria)
    return RestaurantListResponse(
        city=city.strip(),
        total_results=len(restaurants),
        restaurants=restaurants,
    )


@router.get("/transportation", response_model=TransportationListResponse)
async def list_transportation(
    resolver: ResolverDep,
    criteria: FilterCriteriaDep,
    city: str = "",
) -> TransportationListResponse:
    transportation = filter_options(resolver.resolve_transportation(city), criteria)
    return TransportationListResponse(
        city=city.strip(),
        total_results=len(transportation),
        transportation=transportation,
    )


@router.post("/options/filter", response_model=OptionFilterResponse)
async def filter_posted_options(request: OptionFilterRequest) -> OptionFilterResponse:
    """Filter client-held option lists; a criteria category limits which list is kept."""
    criteria = request.criteria
    lists = {
        OptionCategory.accommodation: request.hotels,
        OptionCategory.restaurants: request.restaurants,
        OptionCategory.transportation: request.transportation,
    }
    filtered = {
        category: filter_options(options, criteria) if criteria.category in (None, category) else []
        for category, options in lists.items()
    }
    return OptionFilterResponse(
        hotels=filtered[OptionCategory.accommodation],
        restaurants=filtered[OptionCategory.restaurants],
        transportation=filtered[OptionCategory.transportation],
    )
