"""Shared helpers for TMDB stubs and payload fixtures."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import Any

import httpx

API_BASE = "https://api.themoviedb.org/3"


def build_response(url: str, *, status: int = 200, json_data: Any | None = None, content: bytes | None = None) -> httpx.Response:
    request = httpx.Request("GET", url)
    if content is not None:
        return httpx.Response(status_code=status, content=content, request=request)
    return httpx.Response(status_code=status, json=json_data if json_data is not None else {}, request=request)


def summary_payload(movie_id: int, title: str | None = None, release_date: str = "2025-01-01", **extra: Any) -> dict[str, Any]:
    payload = {
        "id": movie_id,
        "title": title or f"Movie {movie_id}",
        "release_date": release_date,
        "poster_path": f"/poster-{movie_id}.jpg",
        "adult": False,
        "popularity": 1.5,
    }
    payload.update(extra)
    return payload


def upcoming_page(page: int, records: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "dates": {"maximum": "2025-12-31", "minimum": "2025-01-01"},
        "page": page,
        "results": records,
        "total_pages": 10,
        "total_results": 200,
    }


def page_of(page: int, size: int = 20) -> dict[str, Any]:
    start = (page - 1) * size + 1
    return upcoming_page(page, [summary_payload(movie_id) for movie_id in range(start, start + size)])


def detail_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "adult": False,
        "backdrop_path": "/m8JTwHFwX7I7JY5fPe4SjqejWag.jpg",
        "belongs_to_collection": {
            "id": 422834,
            "name": "Ant-Man Collection",
            "poster_path": "/9llE4J9sVv8qsvfVGkpugiPTxUV.jpg",
            "backdrop_path": "/2KjtWUBiksmN8LsUouaZnxocu5N.jpg",
        },
        "budget": 200000000,
        "genres": [
            {"id": 28, "name": "Action"},
            {"id": 12, "name": "Adventure"},
            {"id": 878, "name": "Science Fiction"},
        ],
        "homepage": "https://www.marvel.com/movies/ant-man-and-the-wasp-quantumania",
        "id": 640146,
        "imdb_id": "tt10954600",
        "origin_country": ["US"],
        "original_language": "en",
        "original_title": "Ant-Man and the Wasp: Quantumania",
        "overview": "Scott Lang and Hope van Dyne explore the Quantum Realm.",
        "popularity": 7.3318,
        "poster_path": "/qnqGbB22YJ7dSs4o6M7exTpNxPz.jpg",
        "production_companies": [
            {"id": 420, "logo_path": "/hUzeosd33nzE5MCNsZxCGEKTXaQ.png", "name": "Marvel Studios", "origin_country": "US"},
            {"id": 176762, "logo_path": None, "name": "Kevin Feige Productions", "origin_country": "US"},
        ],
        "production_countries": [{"iso_3166_1": "US", "name": "United States of America"}],
        "release_date": "2023-02-15",
        "revenue": 476071180,
        "runtime": 125,
        "spoken_languages": [{"english_name": "English", "iso_639_1": "en", "name": "English"}],
        "status": "Released",
        "tagline": "Witness the beginning of a new dynasty.",
        "title": "Ant-Man and the Wasp: Quantumania",
        "video": False,
        "vote_average": 6.241,
        "vote_count": 5630,
    }
    payload.update(overrides)
    return payload


@dataclass
class RecordedCall:
    url: str
    headers: dict[str, str]
    params: dict[str, Any]


@dataclass
class StubTMDB:
    """Queue canned TMDB responses per endpoint path and record every call."""

    calls: list[RecordedCall] = field(default_factory=list)
    _responses: defaultdict[str, deque] = field(default_factory=lambda: defaultdict(deque))

    def queue(self, path: str, *, status: int = 200, json_data: Any | None = None, content: bytes | None = None) -> None:
        url = f"{API_BASE}{path}"
        self._responses[path].append(build_response(url, status=status, json_data=json_data, content=content))

    def fail_transport(self, path: str, message: str = "connection reset") -> None:
        self._responses[path].append(httpx.ConnectError(message))

    def paths(self) -> list[str]:
        return [call.url.removeprefix(API_BASE) for call in self.calls]

    def client_class(self) -> type:
        stub = self

        class DummyAsyncClient:
            def __init__(self, *args: Any, **kwargs: Any) -> None:
                pass

            async def __aenter__(self) -> DummyAsyncClient:
                return self

            async def __aexit__(self, *args: Any) -> bool:
                return False

            async def get(self, url: str, **kwargs: Any) -> httpx.Response:
                stub.calls.append(
                    RecordedCall(url=url, headers=dict(kwargs.get("headers") or {}), params=dict(kwargs.get("params") or {}))
                )
                path = url.removeprefix(API_BASE)
                if not stub._responses[path]:
                    raise RuntimeError(f"No stub responses configured for {path}")
                outcome = stub._responses[path].popleft()
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome

        return DummyAsyncClient
