from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions.custom import UnauthorizedError
from app.services.reviews import ReviewsService
from app.stats import RequestStats


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_reviews_service(request: Request) -> ReviewsService:
    return request.app.state.reviews_service


def get_request_stats(request: Request) -> RequestStats:
    return request.app.state.request_stats


SettingsDep = Annotated[Settings, Depends(get_settings)]
ReviewsDep = Annotated[ReviewsService, Depends(get_reviews_service)]
RequestStatsDep = Annotated[RequestStats, Depends(get_request_stats)]


def verify_api_key(settings: SettingsDep, key: str | None = None) -> None:
    if not settings.master_api_key or key != settings.master_api_key:
        raise UnauthorizedError()


ApiKeyDep = Depends(verify_api_key)
