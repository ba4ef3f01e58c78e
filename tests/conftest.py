import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from upstream import get_upstream_client, get_upstream_url

UPSTREAM_URL = "http://upstream.test/api/add_emails"


class FakeUpstream:
    """Stands in for the external waitlist service and records what it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.respond = lambda request: httpx.Response(200, json={"message": "ok"})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def upstream():
    fake = FakeUpstream()

    async def override_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake.handler)) as client:
            yield client

    app.dependency_overrides[get_upstream_client] = override_client
    app.dependency_overrides[get_upstream_url] = lambda: UPSTREAM_URL
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client(upstream) -> TestClient:
    with TestClient(app) as c:
        yield c
