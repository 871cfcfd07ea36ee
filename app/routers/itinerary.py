from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import ItineraryDep
from app.schemas.responses import ItineraryResult
from app.schemas.travel import TripRequest

router = APIRouter()


@router.post("/api/itinerary", response_model=ItineraryResult)
async def generate_itinerary(request: TripRequest, service: ItineraryDep) -> ItineraryResult:
    result = await service.generate(request)
    if not result.success:
        return JSONResponse(status_code=502, content=result.model_dump())
    return result
