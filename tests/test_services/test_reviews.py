import pytest

from app.exceptions.custom import ScraperError
from app.schemas.reviews import QueryOptions
from app.services.reviews import ReviewsService

LOCATION_URL = "https://www.google.com/maps/place/Cafe/data=!4m7!3m6!1s0x9662c5:0x1a2b3c!8m2"


class FakeScraper:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def scrape(self, url, sort_type="relevent", pages=1, clean=False):
        self.calls.append({"url": url, "sort_type": sort_type, "pages": pages, "clean": clean})
        if self.error:
            raise self.error
        return self.result


@pytest.mark.asyncio
async def test_get_reviews_normalizes_raw_data(raw_review):
    scraper = FakeScraper(result=[raw_review(review_id="a"), raw_review(review_id="b", name="")])
    service = ReviewsService(scraper)

    reviews = await service.get_reviews(LOCATION_URL, QueryOptions(sort_type="newest", pages=3))

    assert [r.review_id for r in reviews] == ["a"]
    assert scraper.calls == [
        {"url": LOCATION_URL, "sort_type": "newest", "pages": 3, "clean": False},
    ]


@pytest.mark.asyncio
async def test_clean_is_always_forced_off(raw_review):
    scraper = FakeScraper(result=[raw_review()])
    service = ReviewsService(scraper)

    await service.get_reviews(LOCATION_URL, QueryOptions(clean=True))

    assert scraper.calls[0]["clean"] is False


@pytest.mark.asyncio
async def test_default_options(raw_review):
    scraper = FakeScraper(result=[raw_review()])
    service = ReviewsService(scraper)

    await service.get_reviews(LOCATION_URL)

    assert scraper.calls[0]["sort_type"] == "relevent"
    assert scraper.calls[0]["pages"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("result", [0, None, [], False, ""])
async def test_falsy_collector_result_means_no_reviews(result):
    service = ReviewsService(FakeScraper(result=result))

    assert await service.get_reviews(LOCATION_URL) == []


@pytest.mark.asyncio
async def test_collector_error_propagates():
    service = ReviewsService(FakeScraper(error=ScraperError("upstream down", status_code=503)))

    with pytest.raises(ScraperError) as exc_info:
        await service.get_reviews(LOCATION_URL)
    assert exc_info.value.status_code == 503
