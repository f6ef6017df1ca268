"""Shared pytest fixtures: stubbed TMDB transport, settings, and the API client."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from release_radar.core.config import settings
from release_radar.ingestion.observability import fetch_monitor
from release_radar.main import app
from release_radar.services.session_store import session_store
from release_radar.tests.utils import StubTMDB


@pytest.fixture(autouse=True)
def _reset_state() -> None:
    fetch_monitor.reset()
    session_store.clear()
    yield
    fetch_monitor.reset()
    session_store.clear()


@pytest.fixture()
def tmdb_token(monkeypatch: pytest.MonkeyPatch) -> str:
    token = "test-token"
    monkeypatch.setattr(settings, "tmdb_bearer_token", token)
    return token


@pytest.fixture()
def no_tmdb_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "tmdb_bearer_token", None)


@pytest.fixture()
def stub_tmdb(monkeypatch: pytest.MonkeyPatch) -> StubTMDB:
    stub = StubTMDB()
    monkeypatch.setattr("release_radar.ingestion.http.httpx.AsyncClient", stub.client_class())
    return stub


@pytest_asyncio.fixture()
async def client() -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
