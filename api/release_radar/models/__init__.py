from release_radar.models.movie import (
    CollectionRef,
    FetchStatus,
    MovieDetail,
    MovieSummary,
    NamedItem,
    ProductionCompany,
    ProductionCountry,
    QueryParameters,
    SortOption,
    SpokenLanguage,
)

__all__ = [
    "CollectionRef",
    "FetchStatus",
    "MovieDetail",
    "MovieSummary",
    "NamedItem",
    "ProductionCompany",
    "ProductionCountry",
    "QueryParameters",
    "SortOption",
    "SpokenLanguage",
]
