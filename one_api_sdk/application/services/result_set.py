"""Result sets — one page of converted records plus pagination state."""

import logging
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from one_api_sdk.application.interfaces import RecordFetcher
from one_api_sdk.config import DEFAULT_PAGE_SIZE
from one_api_sdk.domain.entities import FetchParams

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Converts one raw API record into a domain record
Mapper = Callable[[dict[str, Any]], T]


@dataclass(frozen=True)
class ResultSet(Generic[T]):
    """Wrapper around one page of results from The One API.

    Holds the immutable request that produced it, so further pages can be
    requested with ``fetch_next_page()``. Each call returns a new ResultSet;
    this one is never modified.

    Attributes:
        total: Total number of records matching the fetch parameters.
        page_size: Page size used to compute offsets of following pages.
        current_page: Zero-based page index of ``data``.
        has_next: Whether there is more data to fetch.
        data: The converted records of this page.
        offset: Offset that was used to fetch ``data``.
    """

    total: int | float
    page_size: int
    current_page: int
    has_next: bool
    data: tuple[T, ...]
    offset: int
    params: FetchParams = field(repr=False)
    mapper: Mapper[T] = field(repr=False, compare=False)
    fetcher: RecordFetcher = field(repr=False, compare=False)

    async def fetch_next_page(self) -> "ResultSet[T]":
        """Fetch the page after this one with otherwise unchanged parameters."""
        next_page = self.current_page + 1
        new_offset = next_page * self.page_size
        logger.debug(
            "Fetching %s page %d (offset=%d)",
            self.params.resource,
            next_page,
            new_offset,
        )
        result = await self.fetcher.fetch(self.params.with_offset(new_offset))
        data = tuple(self.mapper(doc) for doc in result.docs)
        page_size = result.limit or self.page_size
        return ResultSet(
            total=result.total,
            page_size=page_size,
            current_page=next_page,
            has_next=new_offset + page_size < result.total,
            data=data,
            offset=new_offset,
            params=self.params,
            mapper=self.mapper,
            fetcher=self.fetcher,
        )

    async def pages(self) -> AsyncIterator["ResultSet[T]"]:
        """Yield this page, then every following page, one request at a time."""
        page: ResultSet[T] = self
        yield page
        while page.has_next:
            page = await page.fetch_next_page()
            yield page


async def fetch_result_set(
    fetcher: RecordFetcher,
    params: FetchParams,
    mapper: Mapper[T],
) -> ResultSet[T]:
    """Query for data using the given parameters and wrap the first page.

    ``has_next`` on this first page compares the number of returned docs
    with ``total``; it does not check that the server honored ``limit``.

    ``current_page`` is ``offset // page_size``, rounded down. An offset
    that is not a multiple of the page size therefore leads to a next page
    that starts inside this one: ``offset=1`` with a page size of 3 covers
    records 1-3, and ``fetch_next_page()`` asks for offset 3, repeating
    record 3.
    """
    result = await fetcher.fetch(params)
    offset = params.offset or 0
    page_size = result.limit or params.limit or DEFAULT_PAGE_SIZE
    data = tuple(mapper(doc) for doc in result.docs)
    return ResultSet(
        total=result.total,
        page_size=page_size,
        current_page=offset // page_size,
        has_next=len(result.docs) < result.total,
        data=data,
        offset=offset,
        params=params,
        mapper=mapper,
        fetcher=fetcher,
    )
