"""Domain entity describing one request against The One API."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal

from one_api_sdk.domain.cancellation import CancellationToken
from one_api_sdk.domain.filters import FilterRule

SortDirection = Literal["asc", "desc"]


class ResourceKind(str, Enum):
    """Record collections exposed by the API."""

    MOVIE = "movie"
    QUOTE = "quote"


@dataclass(frozen=True)
class FetchParams:
    """Immutable request descriptor handed to a RecordFetcher.

    An ``id`` means a single-record fetch; callers pair it with ``limit=1``
    and leave offset, sort and filters unset. ``None`` values fall back to
    the fetcher's configured defaults.
    """

    resource: ResourceKind
    access_token: str
    id: str | None = None
    limit: int | None = None
    offset: int | None = None
    sort_by: str | None = None
    sort_direction: SortDirection | None = None
    filters: tuple[FilterRule, ...] = ()
    retries: int | None = None
    retry_delay_ms: int | None = None
    cancel_token: CancellationToken | None = None

    def with_offset(self, offset: int) -> "FetchParams":
        """Copy of these parameters pointing at another offset."""
        return replace(self, offset=offset)
