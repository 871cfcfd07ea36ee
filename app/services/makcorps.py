import logging
from datetime import date

import httpx

from app.exceptions.custom import MakcorpsError

logger = logging.getLogger(__name__)

BASE_URL = "https://api.makcorps.com"
DEFAULT_LIMIT = 10


class MakcorpsService:
    def __init__(self, client: httpx.AsyncClient, api_key: str, base_url: str = BASE_URL):
        self._client = client
        self._api_key = api_key
        self._url = f"{base_url.rstrip('/')}/hotels"

    async def search_hotels(
        self,
        city: str,
        check_in: date,
        check_out: date,
        guests: int = 2,
        limit: int = DEFAULT_LIMIT,
    ) -> dict | list:
        """Query hotel prices and return the upstream JSON untouched.

        Raises MakcorpsError with the upstream status and body on any
        non-success response, and without a status on transport failures.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
            "X-API-Key": self._api_key,
        }
        payload = {
            "destination": city,
            "checkIn": check_in.isoformat(),
            "checkOut": check_out.isoformat(),
            "guests": guests,
            "limit": limit,
        }

        try:
            resp = await self._client.post(self._url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise MakcorpsError(f"Makcorps request failed: {exc!r}") from exc

        if resp.status_code >= 400:
            raise MakcorpsError(resp.text, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise MakcorpsError("Makcorps returned a non-JSON body") from exc

        logger.info("Fetched Makcorps hotels for %s (%s to %s)", city, check_in, check_out)
        return data
