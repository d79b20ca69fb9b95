"""Client facade for The One API — movies and quotes from the LotR films."""

import logging
from collections.abc import Iterable
from typing import TypeVar

import httpx

from one_api_sdk.application.interfaces import RecordFetcher
from one_api_sdk.application.schemas import (
    convert_movie_in,
    convert_quote_in,
    wire_field_name,
)
from one_api_sdk.application.services.result_set import (
    Mapper,
    ResultSet,
    fetch_result_set,
)
from one_api_sdk.config import ClientSettings, get_settings
from one_api_sdk.domain.cancellation import CancellationToken
from one_api_sdk.domain.entities import (
    FetchParams,
    Movie,
    MovieQuote,
    ResourceKind,
    SortDirection,
)
from one_api_sdk.domain.filters import FilterRule
from one_api_sdk.infrastructure.http import HttpFetcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TheOneApiClient:
    """Read-only client for The One API.

    Configuration is resolved once at construction: explicit keyword
    arguments win over ``settings``, which in turn carries the library
    defaults (page size 100, 2 retries, 200 ms retry delay).

    An ``http_client`` passed in is owned by this instance from then on:
    ``aclose()`` (or leaving the ``async with`` block) closes it. Without
    one, every fetch opens and closes its own connection.

    Usage:
        async with TheOneApiClient(access_token="...") as client:
            movies = await client.fetch_movies(sort_by="name")
            while movies.has_next:
                movies = await movies.fetch_next_page()
    """

    def __init__(
        self,
        access_token: str | None = None,
        *,
        default_page_size: int | None = None,
        default_retries: int | None = None,
        default_retry_delay_ms: int | None = None,
        settings: ClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
        fetcher: RecordFetcher | None = None,
    ):
        settings = settings or ClientSettings()
        self._access_token = access_token or settings.access_token
        if not self._access_token:
            raise ValueError("An access token is required to call The One API")

        self._page_size = (
            default_page_size if default_page_size is not None else settings.default_page_size
        )
        self._retries = (
            default_retries if default_retries is not None else settings.default_retries
        )
        self._retry_delay_ms = (
            default_retry_delay_ms
            if default_retry_delay_ms is not None
            else settings.default_retry_delay_ms
        )
        self._http_client = http_client
        self._fetcher = fetcher or HttpFetcher(
            settings.base_url,
            default_page_size=self._page_size,
            default_retries=self._retries,
            default_retry_delay_ms=self._retry_delay_ms,
            default_sort_direction=settings.default_sort_direction,
            timeout=settings.request_timeout,
            http_client=http_client,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "TheOneApiClient":
        """Build a client from ONE_API_* environment variables / .env."""
        return cls(settings=get_settings(), **kwargs)

    async def __aenter__(self) -> "TheOneApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the httpx client handed to this instance, if any.

        The client is closed even though the caller created it.
        """
        if self._http_client is not None:
            await self._http_client.aclose()

    # ── Single records ───────────────────────────────────────────────

    async def fetch_movie(
        self, id: str, *, cancel_token: CancellationToken | None = None
    ) -> Movie | None:
        """Fetch a single movie by its ID, or None when there is no match."""
        return await self._fetch_one(ResourceKind.MOVIE, id, convert_movie_in, cancel_token)

    async def fetch_quote(
        self, id: str, *, cancel_token: CancellationToken | None = None
    ) -> MovieQuote | None:
        """Fetch a single quote by its ID, or None when there is no match."""
        return await self._fetch_one(ResourceKind.QUOTE, id, convert_quote_in, cancel_token)

    # ── Collections ──────────────────────────────────────────────────

    async def fetch_movies(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        sort_by: str | None = None,
        sort_direction: SortDirection | None = None,
        filters: Iterable[FilterRule] | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> ResultSet[Movie]:
        """Fetch a page of movies matching the given parameters."""
        params = self._collection_params(
            ResourceKind.MOVIE,
            Movie,
            limit=limit,
            offset=offset,
            sort_by=sort_by,
            sort_direction=sort_direction,
            filters=filters,
            cancel_token=cancel_token,
        )
        return await fetch_result_set(self._fetcher, params, convert_movie_in)

    async def fetch_quotes(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        sort_by: str | None = None,
        sort_direction: SortDirection | None = None,
        filters: Iterable[FilterRule] | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> ResultSet[MovieQuote]:
        """Fetch a page of quotes matching the given parameters."""
        params = self._collection_params(
            ResourceKind.QUOTE,
            MovieQuote,
            limit=limit,
            offset=offset,
            sort_by=sort_by,
            sort_direction=sort_direction,
            filters=filters,
            cancel_token=cancel_token,
        )
        return await fetch_result_set(self._fetcher, params, convert_quote_in)

    # ── Internals ────────────────────────────────────────────────────

    async def _fetch_one(
        self,
        resource: ResourceKind,
        id: str,
        mapper: Mapper[T],
        cancel_token: CancellationToken | None,
    ) -> T | None:
        if not id:
            raise ValueError(f"A {resource.value} ID is required")
        result = await self._fetcher.fetch(
            FetchParams(
                resource=resource,
                access_token=self._access_token,
                id=id,
                limit=1,
                retries=self._retries,
                retry_delay_ms=self._retry_delay_ms,
                cancel_token=cancel_token,
            )
        )
        if not result.docs:
            logger.info("No %s found with id '%s'", resource.value, id)
            return None
        return mapper(result.docs[0])

    def _collection_params(
        self,
        resource: ResourceKind,
        record_type: type,
        *,
        limit: int | None,
        offset: int | None,
        sort_by: str | None,
        sort_direction: SortDirection | None,
        filters: Iterable[FilterRule] | None,
        cancel_token: CancellationToken | None,
    ) -> FetchParams:
        return FetchParams(
            resource=resource,
            access_token=self._access_token,
            limit=limit if limit is not None else self._page_size,
            offset=offset,
            sort_by=wire_field_name(record_type, sort_by) if sort_by else None,
            sort_direction=sort_direction,
            filters=tuple(filters or ()),
            retries=self._retries,
            retry_delay_ms=self._retry_delay_ms,
            cancel_token=cancel_token,
        )
