import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import UnauthorizedError

logger = logging.getLogger(__name__)


async def unauthorized_error_handler(request: Request, _exc: UnauthorizedError) -> JSONResponse:
    logger.warning("Rejected request to %s: invalid API key", request.url.path)
    return JSONResponse(
        status_code=401,
        content={"error": "Unauthorized"},
    )
