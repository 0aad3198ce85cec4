import time


class RequestStats:
    """Process-wide counters reported by /health."""

    def __init__(self) -> None:
        self._started_at = time.monotonic()
        self._review_count = 0

    @property
    def review_count(self) -> int:
        return self._review_count

    @property
    def uptime_seconds(self) -> float:
        return time.monotonic() - self._started_at

    def increment(self) -> int:
        # No await between read and write, so concurrent requests cannot lose an update.
        self._review_count += 1
        return self._review_count
