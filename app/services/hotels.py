import logging
from datetime import date

from app.exceptions.custom import MakcorpsError
from app.mappers.hotel_mapper import normalize_hotels
from app.schemas.responses import HotelQueryResult
from app.services.destinations import DestinationResolver
from app.services.makcorps import DEFAULT_LIMIT, MakcorpsService

logger = logging.getLogger(__name__)


class HotelService:
    """Live hotel prices with curated substitutes when the upstream fails.

    ``fetch_hotels`` never raises: a blank city, a missing API key, an
    upstream error or an empty upstream answer all come back as a
    HotelQueryResult the caller can render.
    """

    def __init__(
        self,
        resolver: DestinationResolver,
        makcorps: MakcorpsService | None = None,
        default_limit: int = DEFAULT_LIMIT,
    ):
        self._resolver = resolver
        self._makcorps = makcorps
        self._default_limit = default_limit

    async def fetch_hotels(
        self,
        city: str,
        check_in: date,
        check_out: date,
        guests: int = 2,
        limit: int | None = None,
    ) -> HotelQueryResult:
        city = city.strip()
        if not city:
            return HotelQueryResult(success=False, error="City is required")

        logger.info(
            "Fetching hotels for %s from %s to %s for %d guests",
            city, check_in, check_out, guests,
        )

        if self._makcorps is None:
            logger.warning("MAKCORPS_API_KEY not configured, using fallback data")
            return self._fallback(city, "MAKCORPS_API_KEY not configured")

        try:
            data = await self._makcorps.search_hotels(
                city, check_in, check_out, guests=guests, limit=limit or self._default_limit
            )
        except MakcorpsError as exc:
            logger.exception("Makcorps error for %s (status=%s)", city, exc.status_code)
            if exc.status_code is not None:
                return self._fallback(city, f"Makcorps API error: {exc.status_code} - {exc.message}")
            return self._fallback(city, exc.message)

        hotels = normalize_hotels(data, city)
        if not hotels:
            logger.info("Makcorps returned no hotels for %s, using curated data", city)
            curated = self._resolver.resolve(city)
            return HotelQueryResult(
                success=True,
                hotels=curated,
                city=city,
                total_results=len(curated),
                fallback=True,
            )

        return HotelQueryResult(
            success=True,
            hotels=hotels,
            city=city,
            total_results=len(hotels),
        )

    def _fallback(self, city: str, error: str) -> HotelQueryResult:
        hotels = self._resolver.resolve(city)
        return HotelQueryResult(
            success=False,
            hotels=hotels,
            city=city,
            total_results=len(hotels),
            error=error,
            fallback=True,
        )
