import logging
import sys
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import UnauthorizedError
from app.exceptions.handlers import unauthorized_error_handler
from app.routers.health import router as health_router
from app.routers.reviews import router as reviews_router
from app.services.reviews import ReviewsService
from app.services.scraper import GoogleMapsScraperService
from app.stats import RequestStats

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not settings.master_api_key:
        logger.warning("MASTER_API_KEY is not set; every /reviews request will be rejected")

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        scraper = GoogleMapsScraperService(client, page_delay=settings.scraper_page_delay)

        app.state.settings = settings
        app.state.reviews_service = ReviewsService(scraper)
        app.state.request_stats = RequestStats()

        yield


app = FastAPI(title="Maps Reviews API", lifespan=lifespan)

app.add_exception_handler(UnauthorizedError, unauthorized_error_handler)

app.include_router(reviews_router)
app.include_router(health_router)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=Settings().port)
