"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
import requests
from fastapi import FastAPI
from fastapi.testclient import TestClient

from meter_api.app.core.config import Settings
from meter_api.app.core.store import MeterStore
from meter_api.app.main import create_app


API_PREFIX = "/api/v1"


@pytest.fixture
def settings() -> Settings:
    """Test configuration: fixtures loaded, routes under /api/v1."""
    return Settings(api_prefix=API_PREFIX, seed_fixtures=True, log_level="WARNING", log_file="")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh application (and therefore a fresh store) per test."""
    return create_app(settings)


@pytest.fixture
def store(app: FastAPI) -> MeterStore:
    return app.state.store


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


class InProcessSession:
    """Minimal ``requests.Session`` stand-in that forwards to a TestClient.

    Lets ``MeterAPI`` talk to the in-process app while still going
    through real ``requests.Response`` objects.
    """

    def __init__(self, client: TestClient):
        self.client = client
        self.calls = []

    def request(self, method, url, json=None, timeout=None, **kwargs) -> requests.Response:
        self.calls.append((method, url, json))
        resp = self.client.request(method, url, json=json)
        out = requests.Response()
        out.status_code = resp.status_code
        out._content = resp.content
        out.headers.update(resp.headers)
        out.url = url
        out.encoding = "utf-8"
        return out


@pytest.fixture
def session(client: TestClient) -> InProcessSession:
    return InProcessSession(client)
