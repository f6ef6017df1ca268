from fastapi import Cookie, Depends, Response

from release_radar.core.config import settings
from release_radar.services.session_store import BrowseSession, SessionStore, session_store


def get_session_store() -> SessionStore:
    return session_store


async def get_browse_session(
    response: Response,
    session_id: str | None = Cookie(default=None, alias=settings.session_cookie_name),
    store: SessionStore = Depends(get_session_store),
) -> BrowseSession:
    """Resolve the caller's browse session, issuing a cookie for new ones."""
    browse_session = store.get_or_create(session_id)
    if browse_session.session_id != session_id:
        response.set_cookie(
            settings.session_cookie_name,
            browse_session.session_id,
            httponly=True,
            samesite="lax",
        )
    return browse_session
