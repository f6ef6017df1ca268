"""Release date parsing helpers for TMDB payloads."""

from __future__ import annotations

from datetime import date


def parse_release_date(value: str | None) -> date | None:
    """Parse YYYY, YYYY-MM, or YYYY-MM-DD strings into dates.

    Anything else (including empty strings and impossible calendar dates)
    yields None rather than raising.
    """
    if not value or not isinstance(value, str):
        return None
    value = value.strip()
    try:
        if len(value) == 4:
            return date.fromisoformat(f"{value}-01-01")
        if len(value) == 7:
            return date.fromisoformat(f"{value}-01")
        if len(value) == 10:
            return date.fromisoformat(value)
    except ValueError:
        return None
    return None
