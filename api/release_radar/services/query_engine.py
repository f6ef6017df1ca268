"""Derive the displayed list from the canonical upcoming collection.

Invariants:
- Pure: no I/O, the canonical collection is never mutated.
- Output ids are always a subset of the canonical ids.
- Sorting is stable in both directions; equal keys keep their input order.
"""

from __future__ import annotations

import unicodedata
from datetime import date
from typing import Callable, Iterable

from release_radar.models.movie import MovieSummary, QueryParameters, SortOption
from release_radar.utils.datetime import parse_release_date

TitleKey = tuple[str, str, str]
DateKey = tuple[int, date]


def _strip_accents(value: str) -> str:
    normalized = unicodedata.normalize("NFKD", value)
    return "".join(char for char in normalized if not unicodedata.combining(char))


def title_collation_key(title: str) -> TitleKey:
    """Approximate locale collation: base letters first, then accents, then case (lower before upper)."""
    folded = title.casefold()
    return (_strip_accents(folded), folded, title.swapcase())


def release_date_key(release_date: str) -> DateKey:
    """Valid dates order naturally; unparsable dates are equal and rank above every valid date."""
    parsed = parse_release_date(release_date)
    if parsed is None:
        return (1, date.min)
    return (0, parsed)


def filter_by_title(movies: Iterable[MovieSummary], search_term: str) -> list[MovieSummary]:
    """Keep titles containing ``search_term`` case-insensitively; an empty term keeps everything."""
    if not search_term:
        return list(movies)
    needle = search_term.lower()
    return [movie for movie in movies if needle in movie.title.lower()]


_SORTS: dict[SortOption, tuple[Callable[[MovieSummary], tuple], bool]] = {
    SortOption.TITLE_ASC: (lambda movie: title_collation_key(movie.title), False),
    SortOption.TITLE_DESC: (lambda movie: title_collation_key(movie.title), True),
    SortOption.DATE_ASC: (lambda movie: release_date_key(movie.release_date), False),
    SortOption.DATE_DESC: (lambda movie: release_date_key(movie.release_date), True),
}


def sort_movies(movies: list[MovieSummary], sort_option: SortOption) -> list[MovieSummary]:
    """Return a new list ordered by ``sort_option``; ``NONE`` keeps the given order."""
    ordering = _SORTS.get(SortOption(sort_option))
    if ordering is None:
        return list(movies)
    key, reverse = ordering
    # reverse=True keeps equal keys in input order.
    return sorted(movies, key=key, reverse=reverse)


def derive_displayed(canonical: Iterable[MovieSummary], params: QueryParameters) -> list[MovieSummary]:
    """Filter then sort the canonical collection for display."""
    filtered = filter_by_title(canonical, params.search_term)
    return sort_movies(filtered, params.sort_option)
