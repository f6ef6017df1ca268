"""Single-movie detail state with request-generation tagging.

Invariants:
- Only the outcome of the most recently issued load is applied to the state.
- A failed load clears the previous detail.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from release_radar.ingestion.http import AcquisitionError
from release_radar.ingestion.tmdb import TMDBClient
from release_radar.models.movie import FetchStatus, MovieDetail

logger = logging.getLogger("release_radar.services.detail")


@dataclass(slots=True)
class DetailResult:
    """Outcome of one load call, whether or not it reached the state."""
    movie_id: int
    detail: MovieDetail | None = None
    error: AcquisitionError | None = None
    applied: bool = True


class DetailFetcher:
    """Owns the detail record currently shown for one browse session."""

    def __init__(self, client: TMDBClient) -> None:
        self.client = client
        self.status = FetchStatus()
        self.movie_id: int | None = None
        self.detail: MovieDetail | None = None
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def load(self, movie_id: int) -> DetailResult:
        """Fetch ``movie_id``; the state only changes if no newer load was issued meanwhile."""
        self._generation += 1
        generation = self._generation
        self.movie_id = movie_id
        self.status.start()
        try:
            detail = await self.client.fetch_detail(movie_id)
        except AcquisitionError as exc:
            result = DetailResult(movie_id=movie_id, error=exc)
        else:
            result = DetailResult(movie_id=movie_id, detail=detail)

        if generation != self._generation:
            logger.info("Discarding stale detail outcome for movie %s (generation %s)", movie_id, generation)
            result.applied = False
            return result

        if result.error is not None:
            logger.warning(
                "Detail fetch for movie %s failed (%s): %s", movie_id, result.error.kind, result.error.message
            )
            self.detail = None
            self.status.fail(result.error.message, result.error.kind)
        else:
            self.detail = result.detail
            self.status.succeed()
        return result
