"""Abstract record fetcher interface — port for the HTTP layer.

Result sets and the client facade depend only on this interface, so the
transport can be swapped out (or faked in tests).
"""

from abc import ABC, abstractmethod

from one_api_sdk.application.schemas import ApiResult
from one_api_sdk.domain.entities import FetchParams


class RecordFetcher(ABC):
    """Port — defines what the application layer needs from the transport."""

    @abstractmethod
    async def fetch(self, params: FetchParams, retry_count: int = 0) -> ApiResult:
        """Perform one logical fetch and return the validated result.

        Args:
            params: The request descriptor.
            retry_count: Number of attempts already spent on this request.

        Returns:
            The validated ApiResult for the requested page or record.

        Raises:
            OneApiError: A classified failure once retries are exhausted.
            SchemaViolationError: If the response does not match ApiResult.
            FetchCancelledError: If the request's cancellation token fired.
        """
        ...
