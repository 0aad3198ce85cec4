import asyncio
import json
import logging
import re
from typing import Any

import httpx

from app.exceptions.custom import ScraperError
from app.mappers.review_mapper import parse_raw_reviews

logger = logging.getLogger(__name__)

LISTUGCPOSTS_URL = "https://www.google.com/maps/rpc/listugcposts"

SORT_TYPES = {
    "relevent": 1,
    "newest": 2,
    "highest_rating": 3,
    "lowest_rating": 4,
}

# Anti-XSSI prefix prepended to every RPC response
_XSSI_PREFIX = ")]}'"

_PLACE_ID_RE = re.compile(r"!1s([a-zA-Z0-9_:]+)!")

_PAGE_SIZE = 10


def extract_place_id(url: str) -> str:
    """Pull the place id token out of a Google Maps location URL.

    Maps URLs can carry several ``!1s`` tokens; the second one is the place
    when present.
    """
    matches = _PLACE_ID_RE.findall(url)
    if not matches:
        raise ScraperError(f"Could not find a place id in URL: {url}")
    return matches[1] if len(matches) > 1 else matches[0]


def build_pb(place_id: str, sort: int, page_token: str = "") -> str:
    return (
        f"!1m6!1s{place_id}!6m4!4m1!1e1!4m1!1e3"
        f"!2m2!1i{_PAGE_SIZE}!2s{page_token}"
        f"!5m2!7e81!8m9!2b1!3b1!5b1!7b1!12m4!1b1!2b1!4m1!1e1!11m0"
        f"!13m1!1e{sort}"
    )


def decode_rpc_body(text: str) -> Any:
    """Strip the anti-XSSI prefix and decode the JSON payload."""
    body = text.lstrip()
    if body.startswith(_XSSI_PREFIX):
        body = body[len(_XSSI_PREFIX):]
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise ScraperError(f"Unreadable response from Google Maps: {exc}") from exc


def _next_page_token(data: Any) -> str:
    if isinstance(data, list) and len(data) > 1 and isinstance(data[1], str):
        return data[1].replace('"', "")
    return ""


def _page_reviews(data: Any) -> list:
    if isinstance(data, list) and len(data) > 2 and isinstance(data[2], list):
        return data[2]
    return []


class GoogleMapsScraperService:
    def __init__(self, client: httpx.AsyncClient, page_delay: float = 1.0):
        self._client = client
        self._page_delay = page_delay

    async def fetch_page(self, place_id: str, sort: int, page_token: str = "") -> Any:
        params = {
            "authuser": "0",
            "hl": "en",
            "gl": "us",
            "pb": build_pb(place_id, sort, page_token),
        }

        resp = await self._client.get(LISTUGCPOSTS_URL, params=params)

        if resp.status_code == 429:
            raise ScraperError("Rate limit exceeded for Google Maps", status_code=429)
        if resp.status_code >= 400:
            raise ScraperError(resp.text, status_code=resp.status_code)

        return decode_rpc_body(resp.text)

    async def scrape(
        self,
        url: str,
        sort_type: str = "relevent",
        pages: int = 1,
        clean: bool = False,
    ) -> list | None:
        """Collect raw review entries for a location.

        Returns None when the location has no reviews. With ``clean`` the
        entries are normalized before being returned.
        """
        if sort_type not in SORT_TYPES:
            raise ScraperError(f"Invalid sort type: {sort_type}")
        if isinstance(pages, bool) or not isinstance(pages, int) or pages < 1:
            raise ScraperError(f"Invalid number of pages: {pages}")

        place_id = extract_place_id(url)
        sort = SORT_TYPES[sort_type]

        data = await self.fetch_page(place_id, sort)
        reviews = list(_page_reviews(data))
        if not reviews:
            logger.info("No reviews found for place %s", place_id)
            return None

        page_token = _next_page_token(data)
        page = 2
        while page_token and page <= pages:
            await asyncio.sleep(self._page_delay)
            data = await self.fetch_page(place_id, sort, page_token)
            reviews.extend(_page_reviews(data))
            page_token = _next_page_token(data)
            page += 1

        logger.info("Collected %d raw reviews for place %s (%d page(s))", len(reviews), place_id, page - 1)

        if clean:
            return parse_raw_reviews(reviews)
        return reviews
