from __future__ import annotations

import logging
from typing import Any

from release_radar.core.config import settings
from release_radar.ingestion.http import MissingCredentialError, TransportError, fetch_json
from release_radar.ingestion.observability import fetch_monitor
from release_radar.models.movie import MovieDetail, MovieSummary

BEARER_PREFIX = "Bearer "

logger = logging.getLogger("release_radar.ingestion.tmdb")


class TMDBClient:
    source_name = "tmdb"

    def __init__(self, bearer_token: str | None = None, *, api_base: str | None = None, language: str | None = None) -> None:
        self.bearer_token = bearer_token if bearer_token is not None else settings.tmdb_bearer_token
        self.api_base = (api_base or settings.tmdb_api_base).rstrip("/")
        self.language = language or settings.tmdb_language

    def _auth(self) -> dict[str, str]:
        if not self.bearer_token:
            raise MissingCredentialError()
        token = self.bearer_token
        return {
            "accept": "application/json",
            "Authorization": token if token.startswith(BEARER_PREFIX) else f"{BEARER_PREFIX}{token}",
        }

    async def fetch_upcoming_page(self, page: int) -> list[MovieSummary]:
        """Fetch one page of the upcoming listing."""
        headers = self._auth()
        payload = await fetch_monitor.track(
            self.source_name,
            "upcoming",
            lambda: fetch_json(
                f"{self.api_base}/movie/upcoming",
                headers=headers,
                params={"language": self.language, "page": page},
            ),
            context={"page": page},
        )
        if not isinstance(payload, dict):
            raise TransportError(f"Unexpected upcoming payload on page {page}")
        results = payload.get("results") or []
        if not isinstance(results, list):
            raise TransportError(f"Unexpected results on page {page}")
        movies: list[MovieSummary] = []
        for record in results:
            if not isinstance(record, dict):
                logger.warning("Skipping non-object record on upcoming page %s", page)
                continue
            try:
                movies.append(MovieSummary.from_payload(record))
            except ValueError as exc:
                logger.warning("Skipping upcoming record on page %s: %s", page, exc)
        return movies

    async def fetch_upcoming(self, page_count: int) -> list[MovieSummary]:
        """Fetch ``page_count`` listing pages one after another and concatenate them.

        The first failing page aborts the run; later pages are never requested.
        """
        if page_count < 1:
            raise ValueError("page_count must be a positive integer")
        self._auth()
        movies: list[MovieSummary] = []
        for page in range(1, page_count + 1):
            movies.extend(await self.fetch_upcoming_page(page))
        logger.info("Fetched %d upcoming movies across %d pages", len(movies), page_count)
        return movies

    async def fetch_detail(self, movie_id: int | str) -> MovieDetail:
        """Fetch the full record for one movie."""
        headers = self._auth()
        payload: Any = await fetch_monitor.track(
            self.source_name,
            "detail",
            lambda: fetch_json(
                f"{self.api_base}/movie/{movie_id}",
                headers=headers,
                params={"language": self.language},
            ),
            context={"movie_id": str(movie_id)},
        )
        if not isinstance(payload, dict):
            raise TransportError(f"Unexpected detail payload for movie {movie_id}")
        return MovieDetail.from_payload(payload)
