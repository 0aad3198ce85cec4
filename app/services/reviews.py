import logging

from app.mappers.review_mapper import parse_raw_reviews
from app.schemas.reviews import ParsedReview, QueryOptions
from app.services.scraper import GoogleMapsScraperService

logger = logging.getLogger(__name__)


class ReviewsService:
    def __init__(self, scraper: GoogleMapsScraperService):
        self._scraper = scraper

    async def get_reviews(self, url: str, options: QueryOptions | None = None) -> list[ParsedReview]:
        """Fetch raw reviews for a location and normalize them.

        Always asks the collector for raw data; cleaning happens here.
        """
        final_options = (options or QueryOptions()).model_copy(update={"clean": False})

        raw_reviews = await self._scraper.scrape(
            url,
            sort_type=final_options.sort_type,
            pages=final_options.pages,
            clean=final_options.clean,
        )
        if not raw_reviews:
            return []

        reviews = parse_raw_reviews(raw_reviews)
        logger.info("Parsed %d reviews for %s", len(reviews), url)
        return reviews
