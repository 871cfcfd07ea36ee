import logging
from datetime import date, timedelta

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from app.dependencies import HotelServiceDep, MakcorpsDep
from app.schemas.responses import HotelQueryResult
from app.services.makcorps import DEFAULT_LIMIT

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/hotels")


def _tomorrow() -> date:
    return date.today() + timedelta(days=1)


class HotelSearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city: str = ""
    check_in: date = Field(default_factory=date.today, alias="checkIn")
    check_out: date = Field(default_factory=_tomorrow, alias="checkOut")
    guests: int = Field(default=2, ge=1)
    limit: int | None = Field(default=None, ge=1)


@router.post("", response_model=HotelQueryResult)
async def search_hotels(request: HotelSearchRequest, service: HotelServiceDep) -> HotelQueryResult:
    result = await service.fetch_hotels(
        request.city,
        request.check_in,
        request.check_out,
        guests=request.guests,
        limit=request.limit,
    )
    if not result.success and not result.fallback:
        return JSONResponse(status_code=400, content=result.model_dump())
    return result


@router.post("/proxy")
async def proxy_hotels(request: HotelSearchRequest, makcorps: MakcorpsDep):
    """Forward to Makcorps and return its body as-is.

    Upstream errors keep their status code (see makcorps_error_handler).
    """
    if makcorps is None:
        raise HTTPException(status_code=503, detail="Makcorps not configured")
    if not request.city.strip():
        raise HTTPException(status_code=400, detail="City is required")

    logger.info("Proxying hotel request for %s", request.city)
    return await makcorps.search_hotels(
        request.city.strip(),
        request.check_in,
        request.check_out,
        guests=request.guests,
        limit=request.limit or DEFAULT_LIMIT,
    )
