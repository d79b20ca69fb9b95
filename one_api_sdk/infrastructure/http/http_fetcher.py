"""The One API HTTP fetcher — implements the RecordFetcher interface.

Issues GET requests against ``/v2/<resource>[/<id>]`` with httpx, retries
failed requests with a fixed delay and validates the JSON envelope of every
response.
"""

import asyncio
import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from one_api_sdk.application.interfaces import RecordFetcher
from one_api_sdk.application.schemas import ApiResult
from one_api_sdk.config import (
    DEFAULT_BASE_URL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_RETRIES,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_SORT_DIRECTION,
)
from one_api_sdk.domain.cancellation import CancellationToken
from one_api_sdk.domain.entities import FetchParams
from one_api_sdk.domain.exceptions import (
    ApiConnectionError,
    FetchCancelledError,
    OneApiError,
    RateLimitError,
    SchemaViolationError,
    UnexpectedResponseError,
)
from one_api_sdk.infrastructure.http.query_string import build_query_string

logger = logging.getLogger(__name__)

_RATE_LIMIT_STATUS = 429


class HttpFetcher(RecordFetcher):
    """Infrastructure adapter — fetches records from The One API over HTTP.

    Retries are linear: every failed attempt waits the same delay before the
    whole request is rebuilt and sent again. Only the request itself is
    retried; a response that does not match ApiResult fails immediately.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        default_retries: int = DEFAULT_RETRIES,
        default_retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS,
        default_sort_direction: str = DEFAULT_SORT_DIRECTION,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._default_page_size = default_page_size
        self._default_retries = default_retries
        self._default_retry_delay_ms = default_retry_delay_ms
        self._default_sort_direction = default_sort_direction
        self._timeout = timeout
        self._http_client = http_client

    @staticmethod
    def _get_headers(params: FetchParams) -> dict[str, str]:
        return {"Authorization": f"Bearer {params.access_token}"}

    def _build_url(self, params: FetchParams) -> str:
        """Full request URL: resource path plus the encoded query string."""
        resource = getattr(params.resource, "value", params.resource)
        path = f"/v2/{resource}"
        if params.id is not None:
            path += f"/{quote(str(params.id), safe='')}"
        query = build_query_string(
            limit=params.limit,
            offset=params.offset,
            sort_by=params.sort_by,
            sort_direction=params.sort_direction,
            filters=params.filters,
            default_limit=self._default_page_size,
            default_sort_direction=self._default_sort_direction,
        )
        return f"{self._base_url}{path}?{query}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def fetch(self, params: FetchParams, retry_count: int = 0) -> ApiResult:
        """Fetch one page (or one record) and return the validated envelope."""
        retries = params.retries if params.retries is not None else self._default_retries
        delay_ms = (
            params.retry_delay_ms
            if params.retry_delay_ms is not None
            else self._default_retry_delay_ms
        )
        token = params.cancel_token
        attempt = retry_count

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            while True:
                if token is not None and token.cancelled:
                    raise FetchCancelledError("Fetch cancelled before request was sent")

                url = self._build_url(params)
                logger.debug("GET %s (attempt %d)", url, attempt + 1)
                try:
                    response = await self._send(client, url, self._get_headers(params), token)
                    response.raise_for_status()
                except FetchCancelledError:
                    raise
                except Exception as exc:
                    if attempt < retries:
                        logger.warning(
                            "Request to %s failed (%s), retrying in %d ms (%d/%d)",
                            url,
                            type(exc).__name__,
                            delay_ms,
                            attempt + 1,
                            retries,
                        )
                        await self._delay(delay_ms / 1000, token)
                        attempt += 1
                        continue
                    error = self._classify_error(exc)
                    logger.error("Request to %s failed after %d attempt(s): %s", url, attempt + 1, error)
                    raise error from exc

                return self._parse_result(response)

        finally:
            if should_close:
                await client.aclose()

    async def _send(
        self,
        client: httpx.AsyncClient,
        url: str,
        headers: dict[str, str],
        token: CancellationToken | None,
    ) -> httpx.Response:
        """Send the request, aborting it if the cancellation token fires first."""
        if token is None:
            return await client.get(url, headers=headers)

        request = asyncio.ensure_future(client.get(url, headers=headers))
        waiter = asyncio.ensure_future(token.wait())
        try:
            done, _ = await asyncio.wait(
                {request, waiter}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            request.cancel()
            raise
        finally:
            waiter.cancel()

        if request in done:
            return request.result()

        request.cancel()
        try:
            await request
        except asyncio.CancelledError:
            pass
        raise FetchCancelledError("Fetch cancelled while waiting for a response")

    @staticmethod
    async def _delay(seconds: float, token: CancellationToken | None) -> None:
        """Wait before the next attempt; a cancellation skips the wait."""
        if token is None:
            await asyncio.sleep(seconds)
            return
        try:
            await asyncio.wait_for(token.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return
        raise FetchCancelledError("Fetch cancelled during retry delay")

    @staticmethod
    def _classify_error(exc: Exception) -> OneApiError:
        """Map a low-level failure onto the client's error kinds."""
        if isinstance(exc, httpx.HTTPStatusError):
            status_code = exc.response.status_code
            if status_code == _RATE_LIMIT_STATUS:
                return RateLimitError(status_code, exc)
            return UnexpectedResponseError(status_code, exc)
        if isinstance(exc, httpx.TransportError):
            return ApiConnectionError(exc)
        return OneApiError("Error from The One API", exc)

    @staticmethod
    def _parse_result(response: httpx.Response) -> ApiResult:
        """Validate the response body against the basic API schema."""
        try:
            data = response.json()
        except ValueError as exc:
            raise SchemaViolationError("Response from The One API is not JSON", exc) from exc
        try:
            return ApiResult.model_validate(data)
        except ValidationError as exc:
            raise SchemaViolationError("Unexpected data from The One API", exc) from exc
