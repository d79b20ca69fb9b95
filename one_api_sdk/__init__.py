"""Typed asyncio client for The One API (https://the-one-api.dev)."""

from one_api_sdk.application.services import ResultSet, TheOneApiClient
from one_api_sdk.config import ClientSettings, get_settings
from one_api_sdk.domain.cancellation import CancellationToken
from one_api_sdk.domain.entities import Movie, MovieQuote, ResourceKind, SortDirection
from one_api_sdk.domain.exceptions import (
    ApiConnectionError,
    FetchCancelledError,
    OneApiError,
    RateLimitError,
    SchemaViolationError,
    UnexpectedResponseError,
)
from one_api_sdk.domain.filters import (
    FilterRule,
    doesnt_exist_filter,
    doesnt_match_filter,
    exclude_filter,
    exists_filter,
    greater_than_filter,
    greater_than_or_equal_filter,
    include_filter,
    less_than_filter,
    less_than_or_equal_filter,
    match_filter,
    regex_filter,
)

__version__ = "0.1.0"

__all__ = [
    "TheOneApiClient",
    "ResultSet",
    "ClientSettings",
    "get_settings",
    "CancellationToken",
    "Movie",
    "MovieQuote",
    "ResourceKind",
    "SortDirection",
    "OneApiError",
    "RateLimitError",
    "UnexpectedResponseError",
    "ApiConnectionError",
    "SchemaViolationError",
    "FetchCancelledError",
    "FilterRule",
    "match_filter",
    "doesnt_match_filter",
    "include_filter",
    "exclude_filter",
    "exists_filter",
    "doesnt_exist_filter",
    "regex_filter",
    "less_than_filter",
    "less_than_or_equal_filter",
    "greater_than_filter",
    "greater_than_or_equal_filter",
]
