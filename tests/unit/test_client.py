"""Unit tests for the TheOneApiClient facade."""

import httpx
import pytest

from one_api_sdk.application.interfaces import RecordFetcher
from one_api_sdk.application.schemas import ApiResult
from one_api_sdk.application.services import TheOneApiClient
from one_api_sdk.config import ClientSettings
from one_api_sdk.domain.cancellation import CancellationToken
from one_api_sdk.domain.entities import FetchParams, Movie, MovieQuote, ResourceKind


# ── Fakes ────────────────────────────────────────────────────────────


class FakeFetcher(RecordFetcher):
    """Fake fetcher returning one canned result and recording the request."""

    def __init__(self, result: ApiResult):
        self._result = result
        self.calls: list[FetchParams] = []

    async def fetch(self, params: FetchParams, retry_count: int = 0) -> ApiResult:
        self.calls.append(params)
        return self._result


def _client(fetcher: RecordFetcher, **kwargs) -> TheOneApiClient:
    return TheOneApiClient("foo", fetcher=fetcher, settings=ClientSettings(_env_file=None), **kwargs)


# ── Single records ──


@pytest.mark.asyncio
async def test_fetch_movie_returns_match(movie_in_factory):
    match = movie_in_factory()
    fetcher = FakeFetcher(ApiResult(docs=[match], total=1, limit=1))

    movie = await _client(fetcher).fetch_movie("12345")

    assert isinstance(movie, Movie)
    assert movie.id == match["_id"]
    assert movie.runtime_in_minutes == 201
    params = fetcher.calls[0]
    assert params.id == "12345"
    assert params.access_token == "foo"
    assert params.resource == ResourceKind.MOVIE
    assert params.limit == 1


@pytest.mark.asyncio
async def test_fetch_movie_returns_none_without_match():
    fetcher = FakeFetcher(ApiResult(docs=[], total=0, limit=1))

    assert await _client(fetcher).fetch_movie("12345") is None


@pytest.mark.asyncio
async def test_fetch_quote_returns_match(quote_in_factory):
    match = quote_in_factory()
    fetcher = FakeFetcher(ApiResult(docs=[match], total=1, limit=1))

    quote = await _client(fetcher).fetch_quote("12345")

    assert isinstance(quote, MovieQuote)
    assert quote.id == match["_id"]
    assert quote.movie_id == match["movie"]
    assert fetcher.calls[0].resource == ResourceKind.QUOTE
    assert fetcher.calls[0].id == "12345"


@pytest.mark.asyncio
async def test_fetch_quote_returns_none_without_match():
    fetcher = FakeFetcher(ApiResult(docs=[], total=0, limit=1))

    assert await _client(fetcher).fetch_quote("12345") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["fetch_movie", "fetch_quote"])
async def test_single_fetch_rejects_empty_id(method):
    fetcher = FakeFetcher(ApiResult(docs=[], total=0, limit=1))

    with pytest.raises(ValueError):
        await getattr(_client(fetcher), method)("")

    assert fetcher.calls == []


@pytest.mark.asyncio
async def test_single_fetch_encodes_reserved_characters_in_id():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"docs": [], "total": 0, "limit": 1})

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    async with TheOneApiClient("foo", settings=ClientSettings(_env_file=None), http_client=http_client) as client:
        movie = await client.fetch_movie("a?x=1")

    assert movie is None
    assert seen[0].url.raw_path.startswith(b"/v2/movie/a%3Fx%3D1?")
    assert "x" not in seen[0].url.params


@pytest.mark.asyncio
async def test_single_fetch_passes_retry_configuration():
    fetcher = FakeFetcher(ApiResult(docs=[], total=0, limit=1))
    client = _client(fetcher, default_retries=5, default_retry_delay_ms=10)

    await client.fetch_quote("12345")

    assert fetcher.calls[0].retries == 5
    assert fetcher.calls[0].retry_delay_ms == 10


# ── Collections ──


@pytest.mark.asyncio
async def test_fetch_movies_uses_default_pagination(movie_in_factory):
    fetcher = FakeFetcher(ApiResult(docs=[movie_in_factory()] * 4, total=100, limit=100))

    results = await _client(fetcher).fetch_movies()

    params = fetcher.calls[0]
    assert params.id is None
    assert params.resource == ResourceKind.MOVIE
    assert params.limit == 100
    assert params.offset is None
    assert params.retries == 2
    assert params.retry_delay_ms == 200
    assert results.total == 100
    assert len(results.data) == 4


@pytest.mark.asyncio
async def test_fetch_movies_uses_configured_page_size(movie_in_factory):
    fetcher = FakeFetcher(ApiResult(docs=[movie_in_factory()], total=1, limit=10))

    await _client(fetcher, default_page_size=10).fetch_movies()

    assert fetcher.calls[0].limit == 10


@pytest.mark.asyncio
async def test_fetch_movies_passes_pagination_parameters(movie_in_factory):
    fetcher = FakeFetcher(ApiResult(docs=[movie_in_factory()] * 4, total=100, limit=5))

    results = await _client(fetcher).fetch_movies(limit=5, offset=1)

    assert fetcher.calls[0].limit == 5
    assert fetcher.calls[0].offset == 1
    assert results.total == 100
    assert len(results.data) == 4


@pytest.mark.asyncio
async def test_fetch_movies_passes_sort_and_filters(movie_in_factory):
    fetcher = FakeFetcher(ApiResult(docs=[movie_in_factory()], total=1, limit=100))
    token = CancellationToken()

    await _client(fetcher).fetch_movies(
        sort_by="name",
        sort_direction="desc",
        filters=["name=/King/i"],
        cancel_token=token,
    )

    params = fetcher.calls[0]
    assert params.sort_by == "name"
    assert params.sort_direction == "desc"
    assert params.filters == ("name=/King/i",)
    assert params.cancel_token is token


@pytest.mark.asyncio
async def test_fetch_movies_translates_domain_sort_field(movie_in_factory):
    fetcher = FakeFetcher(ApiResult(docs=[movie_in_factory()], total=1, limit=100))

    await _client(fetcher).fetch_movies(sort_by="runtime_in_minutes")

    assert fetcher.calls[0].sort_by == "runtimeInMinutes"


@pytest.mark.asyncio
async def test_fetch_quotes_passes_sort_and_filters(quote_in_factory):
    fetcher = FakeFetcher(ApiResult(docs=[quote_in_factory()] * 4, total=100, limit=100))

    results = await _client(fetcher).fetch_quotes(
        sort_by="movie_id",
        sort_direction="desc",
        filters=["dialog=/Sam/i"],
    )

    params = fetcher.calls[0]
    assert params.resource == ResourceKind.QUOTE
    assert params.sort_by == "movie"
    assert params.filters == ("dialog=/Sam/i",)
    assert all(isinstance(quote, MovieQuote) for quote in results.data)


# ── Construction ──


def test_requires_access_token(monkeypatch):
    monkeypatch.delenv("ONE_API_ACCESS_TOKEN", raising=False)

    with pytest.raises(ValueError):
        TheOneApiClient(settings=ClientSettings(_env_file=None))


def test_access_token_from_settings():
    client = TheOneApiClient(settings=ClientSettings(_env_file=None, access_token="from-env"))

    assert client._access_token == "from-env"


@pytest.mark.asyncio
async def test_walks_pages_over_http(movie_in_factory):
    movies = [movie_in_factory(_id=f"movie-{i}") for i in range(5)]
    seen_offsets: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        offset = request.url.params.get("offset")
        seen_offsets.append(offset)
        start = int(offset or 0)
        return httpx.Response(
            200, json={"docs": movies[start:start + 3], "total": 5, "limit": 3}
        )

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    async with TheOneApiClient("foo", settings=ClientSettings(_env_file=None), http_client=http_client) as client:
        first = await client.fetch_movies(limit=3)
        second = await first.fetch_next_page()

    assert first.has_next is True
    assert len(first.data) == 3
    assert second.has_next is False
    assert [movie.id for movie in second.data] == ["movie-3", "movie-4"]
    assert seen_offsets == [None, "3"]
    assert http_client.is_closed


@pytest.mark.asyncio
async def test_aclose_closes_injected_http_client():
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    )
    client = TheOneApiClient("foo", settings=ClientSettings(_env_file=None), http_client=http_client)

    await client.aclose()

    assert http_client.is_closed


@pytest.mark.asyncio
async def test_aclose_without_http_client_is_a_no_op():
    client = TheOneApiClient("foo", settings=ClientSettings(_env_file=None))

    await client.aclose()
