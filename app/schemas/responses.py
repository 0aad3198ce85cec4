from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from app.schemas.reviews import ParsedReview


class SearchMetadata(BaseModel):
    id: str
    status: str  # "Success"
    created_at: datetime
    total_time_taken: float


class SearchParameters(BaseModel):
    engine: str = "Maps_reviews"
    url: str
    sort_by: str
    pages_requested: int


class ReviewsResponse(BaseModel):
    search_metadata: SearchMetadata
    search_parameters: SearchParameters
    place_result: dict = {}
    reviews_count: int
    reviews: list[ParsedReview] = []


class HealthResponse(BaseModel):
    status: str
    uptime: str
    runtime_version: str
    memory_usage: str
    review_count: int
