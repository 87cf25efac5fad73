"""Exception hierarchy for the FACEIT API client.

Every failed call raises exactly one of these. Nothing is retried; callers
decide on retry or backoff by catching the specific class.
"""

from __future__ import annotations


class FaceitError(Exception):
    """Base exception for all client errors."""

    pass


class FaceitClientError(FaceitError):
    """Raised when the client is used incorrectly (e.g. not connected)."""

    pass


class FaceitTransportError(FaceitError):
    """Raised when the request fails before any response is received.

    Covers connection errors, TLS failures and timeouts. The underlying
    httpx exception is available as ``__cause__``.
    """

    pass


class InvalidCredentialError(FaceitError):
    """Raised on 401: the bearer API key or access token was rejected."""

    status_code = 401

    def __init__(self, message: str = "Invalid API key or access token"):
        super().__init__(message)


class ServerError(FaceitError):
    """Raised on 500. The response body is not retained."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


class FaceitAPIError(FaceitError):
    """Raised when the API answers with an error or an unreadable body."""

    def __init__(self, message: str, status_code: int, body: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return f"API error {self.status_code}: {self.message}"


class BadRequestError(FaceitAPIError):
    """Raised on 400."""

    pass


class ForbiddenError(FaceitAPIError):
    """Raised on 403."""

    pass


class NotFoundError(FaceitAPIError):
    """Raised on 404."""

    pass


class RateLimitedError(FaceitAPIError):
    """Raised on 429. The client does not back off on its own."""

    pass


class ServiceUnavailableError(FaceitAPIError):
    """Raised on 503."""

    pass


class ResponseDecodeError(FaceitAPIError):
    """Raised when a 2xx body is not valid JSON or breaks the model contract.

    Distinct from the non-2xx errors: the server accepted the request but
    sent something that could not be decoded.
    """

    pass
