import platform
import resource
import sys

from fastapi import APIRouter

from app.dependencies import RequestStatsDep
from app.schemas.responses import HealthResponse

router = APIRouter()


def _peak_rss_mb() -> float:
    """Peak resident set size of the process, in MB (Unix only)."""
    # ru_maxrss is kilobytes on Linux, bytes on macOS
    rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if sys.platform == "darwin":
        return rss / 1024 / 1024
    return rss / 1024


@router.get("/health", response_model=HealthResponse)
async def health(stats: RequestStatsDep) -> HealthResponse:
    return HealthResponse(
        status="ok",
        uptime=f"{int(stats.uptime_seconds)} seconds",
        runtime_version=platform.python_version(),
        memory_usage=f"{_peak_rss_mb():.2f} MB",
        review_count=stats.review_count,
    )
