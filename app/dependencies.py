from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request
from pydantic import ValidationError

from app.schemas.travel import DEFAULT_MAX_PRICE, DEFAULT_MIN_PRICE, FilterCriteria
from app.services.destinations import DestinationResolver
from app.services.hotels import HotelService
from app.services.itinerary import ItineraryService
from app.services.makcorps import MakcorpsService


def get_resolver(request: Request) -> DestinationResolver:
    return request.app.state.destination_resolver


def get_hotel_service(request: Request) -> HotelService:
    return request.app.state.hotel_service


def get_makcorps_service(request: Request) -> MakcorpsService | None:
    return getattr(request.app.state, "makcorps_service", None)


def get_itinerary_service(request: Request) -> ItineraryService:
    return request.app.state.itinerary_service


def get_filter_criteria(
    min_price: Annotated[float, Query()] = DEFAULT_MIN_PRICE,
    max_price: Annotated[float, Query()] = DEFAULT_MAX_PRICE,
    min_rating: Annotated[float, Query()] = 0,
) -> FilterCriteria:
    try:
        return FilterCriteria(min_price=min_price, max_price=max_price, min_rating=min_rating)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=[{"loc": e["loc"], "msg": e["msg"]} for e in exc.errors()],
        )


ResolverDep = Annotated[DestinationResolver, Depends(get_resolver)]
HotelServiceDep = Annotated[HotelService, Depends(get_hotel_service)]
MakcorpsDep = Annotated[MakcorpsService | None, Depends(get_makcorps_service)]
ItineraryDep = Annotated[ItineraryService, Depends(get_itinerary_service)]
FilterCriteriaDep = Annotated[FilterCriteria, Depends(get_filter_criteria)]
