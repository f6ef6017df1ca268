"""Movie records, query parameters, and fetch status for the browse flow."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class SortOption(str, enum.Enum):
    """Sort choices offered by the upcoming list."""
    NONE = ""
    TITLE_ASC = "title-asc"
    TITLE_DESC = "title-desc"
    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"


def _str_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _number_or_none(value: Any) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _objects(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


@dataclass(frozen=True, slots=True)
class MovieSummary:
    """One entry of the upcoming listing."""
    id: int
    title: str = ""
    release_date: str = ""
    poster_path: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> MovieSummary:
        """Build a summary from a listing record; raises ValueError without a usable id."""
        movie_id = payload.get("id")
        if isinstance(movie_id, bool) or not isinstance(movie_id, int):
            raise ValueError(f"listing record has no integer id: {movie_id!r}")
        return cls(
            id=movie_id,
            title=_str_or_empty(payload.get("title")),
            release_date=_str_or_empty(payload.get("release_date")),
            poster_path=_str_or_none(payload.get("poster_path")),
        )


@dataclass(frozen=True, slots=True)
class NamedItem:
    """Genre-like reference with an id and a display name."""
    id: int | None = None
    name: str | None = None


@dataclass(frozen=True, slots=True)
class SpokenLanguage:
    english_name: str | None = None
    iso_639_1: str | None = None
    name: str | None = None


@dataclass(frozen=True, slots=True)
class ProductionCompany:
    id: int | None = None
    name: str | None = None
    logo_path: str | None = None
    origin_country: str | None = None


@dataclass(frozen=True, slots=True)
class ProductionCountry:
    iso_3166_1: str | None = None
    name: str | None = None


@dataclass(frozen=True, slots=True)
class CollectionRef:
    """Parent collection a movie belongs to."""
    id: int | None = None
    name: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None


@dataclass(frozen=True, slots=True)
class MovieDetail:
    """Full record for one movie; every field may be absent."""
    id: int | None = None
    title: str | None = None
    original_title: str | None = None
    tagline: str | None = None
    overview: str | None = None
    status: str | None = None
    original_language: str | None = None
    release_date: str | None = None
    adult: bool = False
    video: bool = False
    budget: int | float | None = None
    revenue: int | float | None = None
    runtime: int | float | None = None
    vote_average: int | float | None = None
    vote_count: int | float | None = None
    popularity: int | float | None = None
    homepage: str | None = None
    imdb_id: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    genres: list[NamedItem] = field(default_factory=list)
    spoken_languages: list[SpokenLanguage] = field(default_factory=list)
    production_companies: list[ProductionCompany] = field(default_factory=list)
    production_countries: list[ProductionCountry] = field(default_factory=list)
    origin_country: list[str] = field(default_factory=list)
    belongs_to_collection: CollectionRef | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> MovieDetail:
        """Map a TMDB movie payload, substituting absent values for missing fields."""
        movie_id = payload.get("id")
        collection = payload.get("belongs_to_collection")
        origin_country = payload.get("origin_country")
        return cls(
            id=movie_id if isinstance(movie_id, int) and not isinstance(movie_id, bool) else None,
            title=_str_or_none(payload.get("title")),
            original_title=_str_or_none(payload.get("original_title")),
            tagline=_str_or_none(payload.get("tagline")),
            overview=_str_or_none(payload.get("overview")),
            status=_str_or_none(payload.get("status")),
            original_language=_str_or_none(payload.get("original_language")),
            release_date=_str_or_none(payload.get("release_date")),
            adult=bool(payload.get("adult")),
            video=bool(payload.get("video")),
            budget=_number_or_none(payload.get("budget")),
            revenue=_number_or_none(payload.get("revenue")),
            runtime=_number_or_none(payload.get("runtime")),
            vote_average=_number_or_none(payload.get("vote_average")),
            vote_count=_number_or_none(payload.get("vote_count")),
            popularity=_number_or_none(payload.get("popularity")),
            homepage=_str_or_none(payload.get("homepage")),
            imdb_id=_str_or_none(payload.get("imdb_id")),
            poster_path=_str_or_none(payload.get("poster_path")),
            backdrop_path=_str_or_none(payload.get("backdrop_path")),
            genres=[NamedItem(id=g.get("id"), name=_str_or_none(g.get("name"))) for g in _objects(payload.get("genres"))],
            spoken_languages=[
                SpokenLanguage(
                    english_name=_str_or_none(lang.get("english_name")),
                    iso_639_1=_str_or_none(lang.get("iso_639_1")),
                    name=_str_or_none(lang.get("name")),
                )
                for lang in _objects(payload.get("spoken_languages"))
            ],
            production_companies=[
                ProductionCompany(
                    id=c.get("id"),
                    name=_str_or_none(c.get("name")),
                    logo_path=_str_or_none(c.get("logo_path")),
                    origin_country=_str_or_none(c.get("origin_country")),
                )
                for c in _objects(payload.get("production_companies"))
            ],
            production_countries=[
                ProductionCountry(
                    iso_3166_1=_str_or_none(c.get("iso_3166_1")),
                    name=_str_or_none(c.get("name")),
                )
                for c in _objects(payload.get("production_countries"))
            ],
            origin_country=[c for c in origin_country if isinstance(c, str) and c]
            if isinstance(origin_country, list)
            else [],
            belongs_to_collection=CollectionRef(
                id=collection.get("id"),
                name=_str_or_none(collection.get("name")),
                poster_path=_str_or_none(collection.get("poster_path")),
                backdrop_path=_str_or_none(collection.get("backdrop_path")),
            )
            if isinstance(collection, dict)
            else None,
        )


@dataclass(frozen=True, slots=True)
class QueryParameters:
    """Search and sort inputs of the list view."""
    search_term: str = ""
    sort_option: SortOption = SortOption.NONE


@dataclass(slots=True)
class FetchStatus:
    """Loading/error state of one independent fetch.

    Idle -> Loading -> (Success | Failure); ``loaded`` records whether any
    run has succeeded so far.
    """
    loading: bool = False
    loaded: bool = False
    error: str | None = None
    error_kind: str | None = None

    def start(self) -> None:
        self.loading = True
        self.error = None
        self.error_kind = None

    def succeed(self) -> None:
        self.loading = False
        self.loaded = True
        self.error = None
        self.error_kind = None

    def fail(self, message: str, kind: str) -> None:
        self.loading = False
        self.error = message
        self.error_kind = kind
