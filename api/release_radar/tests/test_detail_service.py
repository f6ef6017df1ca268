from __future__ import annotations

import asyncio

import pytest

from release_radar.ingestion.http import RequestFailedError
from release_radar.ingestion.tmdb import TMDBClient
from release_radar.models.movie import MovieDetail
from release_radar.services.detail_service import DetailFetcher
from release_radar.tests.utils import detail_payload


class GatedClient:
    """Fake client whose detail responses resolve only when released by the test."""

    def __init__(self) -> None:
        self.gates: dict[int, asyncio.Event] = {}
        self.failures: dict[int, Exception] = {}

    def gate(self, movie_id: int) -> asyncio.Event:
        return self.gates.setdefault(movie_id, asyncio.Event())

    async def fetch_detail(self, movie_id: int) -> MovieDetail:
        await self.gate(movie_id).wait()
        if movie_id in self.failures:
            raise self.failures[movie_id]
        return MovieDetail(id=movie_id, title=f"Movie {movie_id}")


@pytest.mark.asyncio
async def test_load_applies_detail(tmdb_token: str, stub_tmdb) -> None:
    stub_tmdb.queue("/movie/640146", json_data=detail_payload())
    fetcher = DetailFetcher(TMDBClient())

    result = await fetcher.load(640146)

    assert result.applied is True
    assert result.error is None
    assert fetcher.detail is not None
    assert fetcher.detail.title == "Ant-Man and the Wasp: Quantumania"
    assert fetcher.status.loading is False
    assert fetcher.status.error is None


@pytest.mark.asyncio
async def test_failure_clears_previous_detail(tmdb_token: str, stub_tmdb) -> None:
    stub_tmdb.queue("/movie/1", json_data=detail_payload(id=1))
    stub_tmdb.queue("/movie/2", status=401)
    fetcher = DetailFetcher(TMDBClient())
    await fetcher.load(1)

    result = await fetcher.load(2)

    assert isinstance(result.error, RequestFailedError)
    assert fetcher.detail is None
    assert fetcher.status.error == "TMDB request failed (401). Check your token and quota."
    assert fetcher.status.loading is False


@pytest.mark.asyncio
async def test_missing_token_reported_on_status(no_tmdb_token: None, stub_tmdb) -> None:
    fetcher = DetailFetcher(TMDBClient())

    result = await fetcher.load(5)

    assert result.error is not None
    assert fetcher.status.error_kind == "missing_credential"
    assert stub_tmdb.calls == []


@pytest.mark.asyncio
async def test_stale_response_is_discarded() -> None:
    client = GatedClient()
    fetcher = DetailFetcher(client)  # type: ignore[arg-type]

    first = asyncio.create_task(fetcher.load(1))
    await asyncio.sleep(0)
    second = asyncio.create_task(fetcher.load(2))
    await asyncio.sleep(0)

    client.gate(2).set()
    second_result = await second
    client.gate(1).set()
    first_result = await first

    assert second_result.applied is True
    assert first_result.applied is False
    assert first_result.detail is not None and first_result.detail.id == 1
    assert fetcher.detail is not None and fetcher.detail.id == 2
    assert fetcher.movie_id == 2
    assert fetcher.status.loading is False


@pytest.mark.asyncio
async def test_stale_failure_does_not_override_newer_success() -> None:
    client = GatedClient()
    client.failures[1] = RequestFailedError(500)
    fetcher = DetailFetcher(client)  # type: ignore[arg-type]

    first = asyncio.create_task(fetcher.load(1))
    await asyncio.sleep(0)
    second = asyncio.create_task(fetcher.load(2))
    await asyncio.sleep(0)

    client.gate(2).set()
    await second
    client.gate(1).set()
    first_result = await first

    assert first_result.applied is False
    assert fetcher.status.error is None
    assert fetcher.detail is not None and fetcher.detail.id == 2


@pytest.mark.asyncio
async def test_status_stays_loading_while_newest_request_is_pending() -> None:
    client = GatedClient()
    fetcher = DetailFetcher(client)  # type: ignore[arg-type]

    first = asyncio.create_task(fetcher.load(1))
    await asyncio.sleep(0)
    newer_pending = asyncio.create_task(fetcher.load(2))
    await asyncio.sleep(0)

    client.gate(1).set()
    await first

    assert fetcher.status.loading is True
    assert fetcher.detail is None

    client.gate(2).set()
    await newer_pending
    assert fetcher.status.loading is False
    assert fetcher.generation == 2
