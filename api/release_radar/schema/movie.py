"""Response schemas for the upcoming list and movie detail views."""

from __future__ import annotations

from pydantic import BaseModel, Field

from release_radar.models.movie import SortOption

Displayable = int | float | str


class MovieCard(BaseModel):
    """One clickable card in the upcoming list."""
    id: int
    title: str
    release_date: str
    poster_url: str
    detail_path: str


class FetchStatusRead(BaseModel):
    loading: bool = False
    loaded: bool = False
    error: str | None = None
    error_kind: str | None = None

    model_config = {"from_attributes": True}


class QueryRead(BaseModel):
    search_term: str = ""
    sort_option: SortOption = SortOption.NONE

    model_config = {"from_attributes": True}


class UpcomingList(BaseModel):
    """Displayed upcoming movies with the query and fetch state that produced them."""
    movies: list[MovieCard] = Field(default_factory=list)
    total: int = 0
    query: QueryRead
    status: FetchStatusRead


class DetailHero(BaseModel):
    backdrop_url: str
    tagline: str
    badges: list[str]


class DetailPoster(BaseModel):
    url: str
    homepage: str | None = None
    imdb_url: str | None = None


class DetailCoreInfo(BaseModel):
    title: str
    original_title: str
    release_date: str
    adult: str
    video: str
    status: str


class DetailNumbers(BaseModel):
    rating: Displayable
    votes: Displayable
    popularity: Displayable
    budget: str
    revenue: str
    runtime: str


class CompanyRead(BaseModel):
    id: int | None = None
    name: str
    logo_url: str | None = None
    origin_country: str
    logo_path: str


class CollectionRead(BaseModel):
    id: int | None = None
    name: str
    poster_url: str
    poster_path: str
    backdrop_path: str


class DetailIdentifiers(BaseModel):
    movie_id: Displayable
    imdb_id: str
    homepage: str
    poster_path: str
    backdrop_path: str


class MovieDetailView(BaseModel):
    """Multi-panel detail page for a single movie."""
    id: int | None = None
    title: str
    hero: DetailHero
    poster: DetailPoster
    overview: str
    core_info: DetailCoreInfo
    numbers: DetailNumbers
    genres: str
    spoken_languages: str
    origin_countries: str
    production_companies: list[CompanyRead] = Field(default_factory=list)
    production_countries: list[str] = Field(default_factory=list)
    collection: CollectionRead | None = None
    identifiers: DetailIdentifiers
