import importlib

import pytest
from fastapi.testclient import TestClient

from raah.core.rate_limit import RateLimiter


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_sliding_window():
    clock = FakeClock()
    limiter = RateLimiter(max_per_minute=2, clock=clock)
    assert limiter.allow("a")
    assert limiter.allow("a")
    assert not limiter.allow("a")
    assert limiter.allow("b")
    assert limiter.retry_after("a") == 60
    clock.now += 30
    assert limiter.retry_after("a") == 30
    clock.now += 30
    assert limiter.allow("a")


def test_idle_buckets_are_dropped():
    clock = FakeClock()
    limiter = RateLimiter(max_per_minute=1, clock=clock)
    for i in range(50):
        limiter.allow(f"10.0.0.{i}")
    assert len(limiter.buckets) == 50
    clock.now += 61
    assert limiter.allow("10.0.1.1")
    assert list(limiter.buckets) == ["10.0.1.1"]


def test_zero_disables_limit():
    limiter = RateLimiter(max_per_minute=0)
    assert all(limiter.allow("a") for _ in range(100))


@pytest.fixture
def throttled_app(monkeypatch):
    monkeypatch.setenv("RATE_LIMIT_PER_MIN", "1")
    import raah.core.config as config
    importlib.reload(config)
    import raah.main as main
    importlib.reload(main)
    yield main.create_app()
    monkeypatch.undo()
    importlib.reload(config)
    importlib.reload(main)


def test_rate_limit_exceeded(throttled_app):
    client = TestClient(throttled_app)
    headers = {"X-Client-Id": "rl-client"}
    resp1 = client.get("/api/v1/scripts", headers=headers)
    assert resp1.status_code == 200
    resp2 = client.get("/api/v1/scripts", headers=headers)
    assert resp2.status_code == 429
    assert int(resp2.headers["Retry-After"]) >= 1
    # health is exempt
    assert client.get("/api/v1/health", headers=headers).status_code == 200


def test_rotating_client_id_header_does_not_reset_limit(throttled_app):
    client = TestClient(throttled_app)
    codes = [client.get("/api/v1/scripts", headers={"X-Client-Id": f"id{i}"}).status_code for i in range(5)]
    assert codes == [200, 429, 429, 429, 429]
