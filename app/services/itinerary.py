import logging

from app.exceptions.custom import ClaudeError, GeminiError, RateLimitError
from app.mappers.itinerary_prompt import build_itinerary_prompt
from app.schemas.responses import ItineraryResult
from app.schemas.travel import TripRequest
from app.services.claude import ClaudeService
from app.services.gemini import GeminiService

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Unable to generate itinerary. Please try again."


class ItineraryService:
    """Turns a TripRequest into a generated itinerary.

    Upstream failures are reported as ``success=False``; no itinerary text
    is ever made up locally. A successful call without usable text yields
    PLACEHOLDER_TEXT.
    """

    def __init__(self, generator: GeminiService | ClaudeService | None, provider: str):
        self._generator = generator
        self._provider = provider

    async def generate(self, request: TripRequest) -> ItineraryResult:
        if self._generator is None:
            logger.warning("No API key configured for itinerary provider %s", self._provider)
            return ItineraryResult(
                success=False,
                error=f"{self._provider} API key not configured",
                provider=self._provider,
            )

        prompt = build_itinerary_prompt(request)
        try:
            text = await self._generator.generate_text(prompt)
        except (GeminiError, ClaudeError) as exc:
            logger.exception(
                "Itinerary generation failed for %s (status=%s)",
                request.destination, exc.status_code,
            )
            error = f"{self._provider} API error"
            if exc.status_code is not None:
                error = f"{error}: {exc.status_code}"
            return ItineraryResult(
                success=False,
                error=f"{error} - {exc.message}",
                provider=self._provider,
            )
        except RateLimitError as exc:
            logger.warning("Rate limit hit for %s", exc.service)
            return ItineraryResult(success=False, error=str(exc), provider=self._provider)

        if not text:
            logger.warning("No itinerary text in %s response for %s", self._provider, request.destination)
            text = PLACEHOLDER_TEXT
        else:
            logger.info("Generated %d-day itinerary for %s", request.days, request.destination)

        return ItineraryResult(success=True, itinerary=text, provider=self._provider)
