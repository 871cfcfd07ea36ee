import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import MakcorpsError

logger = logging.getLogger(__name__)


async def makcorps_error_handler(_request: Request, exc: MakcorpsError) -> JSONResponse:
    logger.error("Makcorps error: %s (status=%s)", exc.message, exc.status_code)
    # Upstream status is passed through; transport failures have none
    return JSONResponse(
        status_code=exc.status_code or 502,
        content={"error": exc.message},
    )

