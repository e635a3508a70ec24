import httpx
import pytest

from articlepages.cache import ExpiringCache
from articlepages.client import UpstreamClient

API_BASE = "https://api.test/api/article"


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1_000_000.0):
        self.ms = start

    def __call__(self) -> float:
        return self.ms

    def advance(self, ms: float):
        self.ms += ms


class FakeUpstream:
    """Routes path -> (status, json) and records every request path."""

    def __init__(self):
        self.responses = {}
        self.calls = []
        self.fail_with = None

    def add(self, path: str, payload, status: int = 200):
        self.responses[path] = (status, payload)

    def add_redirect(self, path: str, location: str, status: int = 301):
        self.responses[path] = (status, {"location": location})

    def count(self, path: str) -> int:
        return self.calls.count(path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append(path)
        if self.fail_with is not None:
            raise self.fail_with
        if path not in self.responses:
            return httpx.Response(404, json={"error": "not found"})
        status, payload = self.responses[path]
        if 300 <= status < 400:
            return httpx.Response(status, headers={"Location": payload["location"]})
        return httpx.Response(status, json=payload)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ExpiringCache(ttl_ms=30_000, clock=clock)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(upstream):
    http = httpx.Client(transport=httpx.MockTransport(upstream.handler))
    c = UpstreamClient(API_BASE, http=http)
    yield c
    http.close()
