import httpx
import pytest
from httpx import ASGITransport

MASTER_KEY = "test-master-key"


def build_raw_review(
    review_id="ChZDSUhNMG9nS0VJQ0FnSUR",
    name="Ana Pérez",
    thumbnail="https://lh3.googleusercontent.com/a/ana=s120",
    profile_link="https://www.google.com/maps/contrib/1111",
    contributor_id="1111",
    reviews=12,
    photos=4,
    rating=4,
    text="Great coffee and friendly staff",
    date="2 months ago",
    link="https://www.google.com/maps/reviews/data=!4m8!14m7!1m6!2m5!1sChZDSUhNMG9nS0VJQ0FnSUR",
):
    """Raw upstream review entry with every field at its known position."""
    author = [name, thumbnail, [profile_link], contributor_id, None, reviews, photos]
    meta = [None, None, None, None, [None, None, None, None, None, author], None, date]
    content = [[rating]] + [None] * 14 + [[[text]]]
    link_block = [None, None, None, [link]]
    return [[review_id, meta, content, None, link_block]]


@pytest.fixture
def raw_review():
    return build_raw_review


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("MASTER_API_KEY", MASTER_KEY)
    monkeypatch.setenv("SCRAPER_PAGE_DELAY", "0")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
