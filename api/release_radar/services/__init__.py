"""Service-layer helpers for API operations."""
from . import detail_service, presentation, query_engine, session_store, upcoming_service

__all__ = [
    "detail_service",
    "presentation",
    "query_engine",
    "session_store",
    "upcoming_service",
]
