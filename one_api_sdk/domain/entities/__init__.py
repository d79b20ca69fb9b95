from .fetch_params import FetchParams, ResourceKind, SortDirection
from .movie import Movie
from .quote import MovieQuote

__all__ = [
    "FetchParams",
    "ResourceKind",
    "SortDirection",
    "Movie",
    "MovieQuote",
]
