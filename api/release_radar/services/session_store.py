"""Per-client browse sessions holding list and detail state.

Invariants:
- Each session owns exactly one UpcomingBrowser and one DetailFetcher.
- The store never holds more than ``max_sessions`` sessions; the least recently used one is evicted.
"""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable

from release_radar.core.config import settings
from release_radar.ingestion import get_tmdb_client
from release_radar.ingestion.tmdb import TMDBClient
from release_radar.services.detail_service import DetailFetcher
from release_radar.services.upcoming_service import UpcomingBrowser

logger = logging.getLogger("release_radar.services.sessions")


@dataclass
class BrowseSession:
    session_id: str
    upcoming: UpcomingBrowser
    detail: DetailFetcher = field(repr=False)


class SessionStore:
    """In-memory registry of browse sessions keyed by an opaque id."""

    def __init__(
        self,
        *,
        max_sessions: int | None = None,
        client_factory: Callable[[], TMDBClient] = get_tmdb_client,
    ) -> None:
        self.max_sessions = max_sessions or settings.session_cache_size
        self._client_factory = client_factory
        self._sessions: OrderedDict[str, BrowseSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def _create(self) -> BrowseSession:
        client = self._client_factory()
        session = BrowseSession(
            session_id=uuid.uuid4().hex,
            upcoming=UpcomingBrowser(client),
            detail=DetailFetcher(client),
        )
        self._sessions[session.session_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted browse session %s", evicted_id)
        return session

    def get_or_create(self, session_id: str | None) -> BrowseSession:
        """Return the session for ``session_id`` or start a new one."""
        if session_id and session_id in self._sessions:
            self._sessions.move_to_end(session_id)
            return self._sessions[session_id]
        return self._create()

    def clear(self) -> None:
        self._sessions.clear()


session_store = SessionStore()
