"""Upstream clients for movie metadata."""

from __future__ import annotations

from release_radar.ingestion.tmdb import TMDBClient


def get_tmdb_client() -> TMDBClient:
    """Return a TMDB client bound to the current settings."""
    return TMDBClient()
