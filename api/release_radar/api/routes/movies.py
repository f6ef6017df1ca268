"""Upcoming list and movie detail endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from release_radar.api.deps import get_browse_session
from release_radar.ingestion.http import AcquisitionError, MissingCredentialError, RequestFailedError
from release_radar.models.movie import SortOption
from release_radar.schema.movie import FetchStatusRead, MovieDetailView, QueryRead, UpcomingList
from release_radar.services import presentation
from release_radar.services.session_store import BrowseSession
from release_radar.services.upcoming_service import UpcomingBrowser

MAX_REFRESH_PAGES = 20

router = APIRouter()


def _upcoming_payload(browser: UpcomingBrowser) -> UpcomingList:
    displayed = browser.displayed
    return UpcomingList(
        movies=[presentation.movie_card(movie) for movie in displayed],
        total=len(displayed),
        query=QueryRead.model_validate(browser.params),
        status=FetchStatusRead.model_validate(browser.status),
    )


def _http_status_for(error: AcquisitionError) -> int:
    if isinstance(error, MissingCredentialError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    if isinstance(error, RequestFailedError) and error.status_code == status.HTTP_404_NOT_FOUND:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_502_BAD_GATEWAY


@router.get("/movies", response_model=UpcomingList)
async def list_upcoming(
    q: str = Query(default="", max_length=200),
    sort: SortOption = Query(default=SortOption.NONE),
    browse_session: BrowseSession = Depends(get_browse_session),
) -> UpcomingList:
    """Return the upcoming list for exactly the given query; absent parameters mean no filter and no sort."""
    browser = browse_session.upcoming
    await browser.ensure_loaded()
    browser.update_query(search_term=q, sort_option=sort)
    return _upcoming_payload(browser)


@router.post("/movies/refresh", response_model=UpcomingList)
async def refresh_upcoming(
    pages: int | None = Query(default=None, ge=1, le=MAX_REFRESH_PAGES),
    browse_session: BrowseSession = Depends(get_browse_session),
) -> UpcomingList:
    """Re-run the acquisition; on failure the previous list stays visible."""
    browser = browse_session.upcoming
    await browser.load(pages)
    return _upcoming_payload(browser)


@router.get("/movies/{movie_id}", response_model=MovieDetailView)
async def get_movie_detail(
    movie_id: int,
    browse_session: BrowseSession = Depends(get_browse_session),
) -> MovieDetailView:
    """Return the detail page for one movie."""
    result = await browse_session.detail.load(movie_id)
    if result.error is not None:
        raise HTTPException(status_code=_http_status_for(result.error), detail=result.error.message)
    return MovieDetailView.model_validate(presentation.detail_view(result.detail))
