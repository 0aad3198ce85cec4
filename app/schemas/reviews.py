from typing import Literal

from pydantic import BaseModel


class ReviewUser(BaseModel):
    name: str
    link: str | None = None
    contributor_id: str | None = None
    reviews: int = 0
    photos: int = 0
    thumbnail: str | None = None


class ParsedReview(BaseModel):
    review_id: str = ""
    user: ReviewUser
    link: str | None = None
    source: Literal["Google"] = "Google"
    text: str | None = None
    rating: float | None = None
    date: str | None = None  # upstream format, not parsed


class QueryOptions(BaseModel):
    sort_type: str = "relevent"
    pages: int = 1
    clean: bool = False
