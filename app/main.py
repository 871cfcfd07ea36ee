import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings
from app.exceptions.custom import MakcorpsError
from app.exceptions.handlers import makcorps_error_handler
from app.routers.health import router as health_router
from app.routers.hotels import router as hotels_router
from app.routers.itinerary import router as itinerary_router
from app.routers.options import router as options_router
from app.services.claude import ClaudeService
from app.services.destinations import DestinationResolver
from app.services.gemini import GeminiService
from app.services.hotels import HotelService
from app.services.itinerary import ItineraryService
from app.services.makcorps import MakcorpsService

logger = logging.getLogger(__name__)


def build_itinerary_service(
    settings: Settings, client: httpx.AsyncClient
) -> ItineraryService:
    provider = settings.itinerary_provider.lower()
    if provider == "claude":
        claude: ClaudeService | None = None
        if settings.anthropic_api_key:
            claude = ClaudeService(settings.anthropic_api_key, model=settings.claude_model)
        return ItineraryService(claude, provider="claude")

    if provider != "gemini":
        logger.warning("Unknown itinerary provider %r, using gemini", settings.itinerary_provider)
    gemini: GeminiService | None = None
    if settings.gemini_api_key:
        gemini = GeminiService(client, settings.gemini_api_key, url=settings.gemini_url)
    return ItineraryService(gemini, provider="gemini")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        resolver = DestinationResolver()

        makcorps: MakcorpsService | None = None
        if settings.makcorps_api_key:
            makcorps = MakcorpsService(client, settings.makcorps_api_key, base_url=settings.makcorps_base_url)

        app.state.destination_resolver = resolver
        app.state.makcorps_service = makcorps
        app.state.hotel_service = HotelService(
            resolver, makcorps, default_limit=settings.hotel_result_limit
        )
        app.state.itinerary_service = build_itinerary_service(settings, client)

        yield


app = FastAPI(title="Travel Planner", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(MakcorpsError, makcorps_error_handler)

app.include_router(health_router)
app.include_router(hotels_router)
app.include_router(options_router)
app.include_router(itinerary_router)
