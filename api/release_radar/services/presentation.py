"""View-model builders for movie cards and the detail page.

Every absent value is rendered as ``PLACEHOLDER``; nothing here raises for
missing fields.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from release_radar.core.config import settings
from release_radar.models.movie import (
    CollectionRef,
    MovieDetail,
    MovieSummary,
    ProductionCompany,
    SpokenLanguage,
)

PLACEHOLDER = "-"
NO_BACKDROP_URL = "https://placehold.co/1200x500?text=No+Backdrop"
NO_POSTER_URL = "https://placehold.co/500x750?text=No+Poster"
NO_COLLECTION_POSTER_URL = "https://placehold.co/240x360?text=No+Poster"
IMDB_TITLE_URL = "https://www.imdb.com/title/"


def _is_positive_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value) and value > 0


def _or_placeholder(value: Any) -> Any:
    # Falsy values, zero included, render as the placeholder.
    return value if value else PLACEHOLDER


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def image_url(path: str | None, *, base: str | None = None, fallback: str | None = None) -> str | None:
    if path:
        return f"{base or settings.tmdb_image_base}{path}"
    return fallback


def poster_url(path: str | None) -> str:
    """Poster URL for a list card, falling back to the local placeholder asset."""
    return image_url(path, fallback=settings.placeholder_image)


def format_currency(value: Any) -> str:
    """Format a positive amount as whole US dollars, e.g. ``$200,000,000``."""
    if not _is_positive_number(value):
        return PLACEHOLDER
    dollars = Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"${int(dollars):,}"


def format_runtime(minutes: Any) -> str:
    """Format a positive minute count as ``2h 5m``."""
    if not _is_positive_number(minutes):
        return PLACEHOLDER
    return f"{int(minutes // 60)}h {minutes % 60:g}m"


def format_names(names: Iterable[str | None]) -> str:
    """Join non-empty names with commas."""
    cleaned = [name for name in names if name]
    return ", ".join(cleaned) if cleaned else PLACEHOLDER


def format_languages(languages: Iterable[SpokenLanguage]) -> str:
    entries = [
        f"{lang.english_name or lang.name or PLACEHOLDER} ({lang.iso_639_1 or PLACEHOLDER})" for lang in languages
    ]
    return ", ".join(entries) if entries else PLACEHOLDER


def movie_card(movie: MovieSummary) -> dict[str, Any]:
    return {
        "id": movie.id,
        "title": movie.title,
        "release_date": movie.release_date,
        "poster_url": poster_url(movie.poster_path),
        "detail_path": f"/detail/{movie.id}",
    }


def _company(company: ProductionCompany) -> dict[str, Any]:
    return {
        "id": company.id,
        "name": company.name or PLACEHOLDER,
        "logo_url": image_url(company.logo_path),
        "origin_country": _or_placeholder(company.origin_country),
        "logo_path": _or_placeholder(company.logo_path),
    }


def _collection(collection: CollectionRef | None) -> dict[str, Any] | None:
    if collection is None:
        return None
    return {
        "id": collection.id,
        "name": collection.name or PLACEHOLDER,
        "poster_url": image_url(collection.poster_path, fallback=NO_COLLECTION_POSTER_URL),
        "poster_path": _or_placeholder(collection.poster_path),
        "backdrop_path": _or_placeholder(collection.backdrop_path),
    }


def detail_view(detail: MovieDetail) -> dict[str, Any]:
    """Project a movie record into the panels of the detail page."""
    runtime = format_runtime(detail.runtime)
    return {
        "id": detail.id,
        "title": detail.title or PLACEHOLDER,
        "hero": {
            "backdrop_url": image_url(
                detail.backdrop_path, base=settings.tmdb_backdrop_base, fallback=NO_BACKDROP_URL
            ),
            "tagline": detail.tagline or "No tagline available.",
            "badges": [
                _or_placeholder(detail.status),
                _or_placeholder(detail.original_language),
                runtime,
            ],
        },
        "poster": {
            "url": image_url(detail.poster_path, fallback=NO_POSTER_URL),
            "homepage": detail.homepage,
            "imdb_url": f"{IMDB_TITLE_URL}{detail.imdb_id}" if detail.imdb_id else None,
        },
        "overview": detail.overview or "No overview available.",
        "core_info": {
            "title": _or_placeholder(detail.title),
            "original_title": _or_placeholder(detail.original_title),
            "release_date": _or_placeholder(detail.release_date),
            "adult": _yes_no(detail.adult),
            "video": _yes_no(detail.video),
            "status": _or_placeholder(detail.status),
        },
        "numbers": {
            "rating": _or_placeholder(detail.vote_average),
            "votes": _or_placeholder(detail.vote_count),
            "popularity": _or_placeholder(detail.popularity),
            "budget": format_currency(detail.budget),
            "revenue": format_currency(detail.revenue),
            "runtime": runtime,
        },
        "genres": format_names(genre.name for genre in detail.genres),
        "spoken_languages": format_languages(detail.spoken_languages),
        "origin_countries": format_names(detail.origin_country),
        "production_companies": [_company(company) for company in detail.production_companies],
        "production_countries": [
            f"{country.name or PLACEHOLDER} ({country.iso_3166_1 or PLACEHOLDER})"
            for country in detail.production_countries
        ],
        "collection": _collection(detail.belongs_to_collection),
        "identifiers": {
            "movie_id": _or_placeholder(detail.id),
            "imdb_id": _or_placeholder(detail.imdb_id),
            "homepage": _or_placeholder(detail.homepage),
            "poster_path": _or_placeholder(detail.poster_path),
            "backdrop_path": _or_placeholder(detail.backdrop_path),
        },
    }
