import logging
import re
import time
import uuid
from datetime import datetime, timezone
from urllib.parse import unquote

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import ApiKeyDep, RequestStatsDep, ReviewsDep
from app.schemas.responses import ReviewsResponse, SearchMetadata, SearchParameters
from app.schemas.reviews import QueryOptions

logger = logging.getLogger(__name__)

router = APIRouter()


_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_pages(pages: str | None) -> int:
    """Requested page count from the leading integer of ``pages``.

    "3abc" and "2.5" read as 3 and 2; anything without a leading integer,
    or below 1, means 1.
    """
    if pages is None:
        return 1
    match = _LEADING_INT_RE.match(pages)
    if not match:
        return 1
    value = int(match.group(1))
    return value if value >= 1 else 1


@router.get("/reviews", response_model=ReviewsResponse, dependencies=[ApiKeyDep])
async def get_reviews(
    service: ReviewsDep,
    stats: RequestStatsDep,
    url: str | None = None,
    sort_by: str | None = None,
    pages: str | None = None,
) -> ReviewsResponse:
    if not url:
        return JSONResponse(status_code=400, content={"error": "Parameter 'url' is required"})

    try:
        start = time.monotonic()
        location_url = unquote(url)
        options = QueryOptions(
            sort_type=sort_by if sort_by is not None else "relevent",
            pages=parse_pages(pages),
        )
        reviews = await service.get_reviews(location_url, options)

        stats.increment()

        return ReviewsResponse(
            search_metadata=SearchMetadata(
                id=f"search_{uuid.uuid4().hex[:7]}",
                status="Success",
                created_at=datetime.now(timezone.utc),
                total_time_taken=round(time.monotonic() - start, 2),
            ),
            search_parameters=SearchParameters(
                url=location_url,
                sort_by=options.sort_type,
                pages_requested=options.pages,
            ),
            place_result={},
            reviews_count=len(reviews),
            reviews=reviews,
        )
    except Exception as exc:
        logger.exception("Failed to fetch reviews for %s", url)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to process request.", "details": str(exc) or "Unknown error"},
        )
