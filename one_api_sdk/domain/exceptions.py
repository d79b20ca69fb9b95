"""Classified errors raised by the client — transport-independent."""


class OneApiError(Exception):
    """Raised when a call to The One API fails for an unclassified reason.

    Every subclass keeps the low-level failure on ``cause`` and is raised
    with it chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class RateLimitError(OneApiError):
    """Raised when the API answers with a rate-limit status (429)."""

    def __init__(self, status_code: int, cause: BaseException | None = None):
        self.status_code = status_code
        super().__init__("Rate limit reached", cause)


class UnexpectedResponseError(OneApiError):
    """Raised when the API answers with any other non-success status."""

    def __init__(self, status_code: int, cause: BaseException | None = None):
        self.status_code = status_code
        super().__init__(f"Unexpected HTTP response: {status_code}", cause)


class ApiConnectionError(OneApiError):
    """Raised when the request never received a response."""

    def __init__(self, cause: BaseException | None = None):
        super().__init__("HTTP connection error", cause)


class SchemaViolationError(OneApiError):
    """Raised when a response was received but does not have the expected shape."""


class FetchCancelledError(OneApiError):
    """Raised when a fetch is aborted through its cancellation token."""
