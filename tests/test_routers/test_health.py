import platform


async def test_health(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["uptime"].endswith(" seconds")
    assert data["runtime_version"] == platform.python_version()
    assert data["memory_usage"].endswith(" MB")
    assert data["review_count"] == 0


async def test_health_needs_no_key(client):
    resp = await client.get("/health", params={"key": "wrong"})

    assert resp.status_code == 200


def test_peak_rss_is_reported_in_megabytes():
    from app.routers.health import _peak_rss_mb

    # Any running interpreter holds well over 1 MB and far less than 1 TB.
    assert 1 < _peak_rss_mb() < 1024 * 1024
