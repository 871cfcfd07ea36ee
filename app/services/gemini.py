import logging

import httpx
from pydantic import ValidationError

from app.config import GEMINI_URL
from app.exceptions.custom import GeminiError, RateLimitError
from app.schemas.gemini import GenerateContentResponse

logger = logging.getLogger(__name__)


class GeminiService:
    def __init__(self, client: httpx.AsyncClient, api_key: str, url: str = GEMINI_URL):
        self._client = client
        self._api_key = api_key
        self._url = url

    async def generate_text(self, prompt: str) -> str | None:
        """Send a single-prompt generateContent request.

        Returns the first candidate's first text part, or None when the
        response has no such text.
        """
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            resp = await self._client.post(
                self._url,
                params={"key": self._api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise GeminiError(f"Gemini request failed: {exc!r}") from exc

        if resp.status_code == 429:
            raise RateLimitError("Gemini")
        if resp.status_code >= 400:
            raise GeminiError(resp.text, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError:
            logger.warning("Gemini returned a non-JSON body")
            return None

        return self._extract_text(data)

    @staticmethod
    def _extract_text(data) -> str | None:
        try:
            parsed = GenerateContentResponse.model_validate(data)
        except ValidationError:
            logger.warning("Unexpected Gemini response structure")
            return None

        if not parsed.candidates:
            return None
        content = parsed.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text or None
