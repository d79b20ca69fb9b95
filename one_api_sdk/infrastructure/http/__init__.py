"""HTTP infrastructure package."""

from .http_fetcher import HttpFetcher
from .query_string import QueryString, build_query_string

__all__ = ["HttpFetcher", "QueryString", "build_query_string"]
