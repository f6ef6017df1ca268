"""Upcoming list state: acquisition, query parameters, and the displayed view.

Invariants:
- The canonical collection is only ever replaced wholesale by a successful load.
- A failed load leaves the previous canonical collection in place; partial pages are dropped.
- Overlapping loads resolve to the one issued last; earlier outcomes are discarded.
- The displayed collection is written only by ``recompute``.
"""

from __future__ import annotations

import logging

from release_radar.core.config import settings
from release_radar.ingestion.http import AcquisitionError
from release_radar.ingestion.tmdb import TMDBClient
from release_radar.models.movie import FetchStatus, MovieSummary, QueryParameters, SortOption
from release_radar.services.query_engine import derive_displayed

logger = logging.getLogger("release_radar.services.upcoming")


class UpcomingBrowser:
    """Owns the canonical upcoming collection and everything derived from it."""

    def __init__(self, client: TMDBClient, *, page_count: int | None = None) -> None:
        self.client = client
        self.page_count = page_count if page_count is not None else settings.upcoming_page_count
        self.status = FetchStatus()
        self.params = QueryParameters()
        self._canonical: tuple[MovieSummary, ...] = ()
        self._displayed: list[MovieSummary] = []
        self._generation = 0

    @property
    def canonical(self) -> tuple[MovieSummary, ...]:
        return self._canonical

    @property
    def displayed(self) -> list[MovieSummary]:
        return list(self._displayed)

    async def load(self, page_count: int | None = None) -> FetchStatus:
        """Run the acquisition pipeline and report the resulting status.

        Only the most recently issued load may touch the collection or the status.
        """
        pages = page_count if page_count is not None else self.page_count
        if pages < 1:
            raise ValueError("page_count must be at least 1")
        self._generation += 1
        generation = self._generation
        self.status.start()
        try:
            movies = await self.client.fetch_upcoming(pages)
        except AcquisitionError as exc:
            if generation != self._generation:
                logger.info("Discarding stale upcoming failure (generation %s)", generation)
                return self.status
            logger.warning("Upcoming acquisition failed (%s): %s", exc.kind, exc.message)
            self.status.fail(exc.message, exc.kind)
            return self.status
        if generation != self._generation:
            logger.info("Discarding stale upcoming result (generation %s)", generation)
            return self.status
        self._canonical = tuple(movies)
        self.status.succeed()
        self.recompute()
        return self.status

    async def ensure_loaded(self) -> FetchStatus:
        """Load unless a load is running or one has already succeeded."""
        if not self.status.loaded and not self.status.loading:
            await self.load()
        return self.status

    def update_query(self, *, search_term: str | None = None, sort_option: SortOption | str | None = None) -> list[MovieSummary]:
        """Replace the given query inputs and recompute the displayed list."""
        params = self.params
        self.params = QueryParameters(
            search_term=params.search_term if search_term is None else search_term,
            sort_option=params.sort_option if sort_option is None else SortOption(sort_option),
        )
        return self.recompute()

    def recompute(self) -> list[MovieSummary]:
        self._displayed = derive_displayed(self._canonical, self.params)
        return self.displayed
