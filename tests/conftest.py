import json

import httpx
import pytest
from fastapi.testclient import TestClient

from callserver.config import Settings
from callserver.main import create_app


class FakeDaily:
    """Records outbound requests and answers like the Daily rooms API."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = None
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status_code, json=self.body)
        sent = json.loads(request.content)
        return httpx.Response(self.status_code, json={
            "name": sent["name"],
            "privacy": sent["privacy"],
            "config": {"exp": sent["properties"]["exp"]},
        })

    @property
    def called(self) -> bool:
        return bool(self.requests)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def manager_pass():
    return "s3cret"


@pytest.fixture
def settings(manager_pass):
    return Settings(
        daily_api_key="key-123",
        daily_domain="example.daily.co",
        manager_pass=manager_pass,
    )


@pytest.fixture
def daily():
    return FakeDaily()


@pytest.fixture
def transport(daily):
    return httpx.MockTransport(daily)


@pytest.fixture
def client(settings, transport):
    return TestClient(create_app(settings, transport=transport))
