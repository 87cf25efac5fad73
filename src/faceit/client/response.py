"""Response classification for the FACEIT Data API.

Turns a completed HTTP exchange (status code plus the full body text) into
either a decoded model or one exception from ``faceit.client.exceptions``.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from faceit.client.exceptions import (
    BadRequestError,
    FaceitAPIError,
    ForbiddenError,
    InvalidCredentialError,
    NotFoundError,
    RateLimitedError,
    ResponseDecodeError,
    ServerError,
    ServiceUnavailableError,
)

T = TypeVar("T", bound=BaseModel)

# Status code -> (exception class, message prefix)
_STATUS_ERRORS: dict[int, tuple[type[FaceitAPIError], str]] = {
    400: (BadRequestError, "Bad request"),
    403: (ForbiddenError, "Forbidden"),
    404: (NotFoundError, "Not found"),
    429: (RateLimitedError, "Too many requests"),
    503: (ServiceUnavailableError, "Service temporarily unavailable"),
}


def is_success(status_code: int) -> bool:
    """Return True for 2xx status codes."""
    return 200 <= status_code <= 299


def raise_for_status(status_code: int, body_text: str) -> None:
    """Raise the error matching a non-2xx status code.

    Args:
        status_code: HTTP status code of the response.
        body_text: Full response body, attached to the error where useful.

    Raises:
        InvalidCredentialError: On 401, regardless of the body.
        ServerError: On 500, without the body.
        FaceitAPIError: A status-specific subclass for 400/403/404/429/503,
            or the base class for any other non-2xx code.
    """
    if is_success(status_code):
        return

    if status_code == 401:
        raise InvalidCredentialError()
    if status_code == 500:
        raise ServerError()

    known = _STATUS_ERRORS.get(status_code)
    if known is not None:
        error_cls, prefix = known
        raise error_cls(f"{prefix}: {body_text}", status_code, body=body_text)
    raise FaceitAPIError(body_text, status_code, body=body_text)


def decode_body(status_code: int, body_text: str, response_model: type[T]) -> T:
    """Decode a successful response body into ``response_model``.

    Raises:
        ResponseDecodeError: If the body is not JSON, misses a mandatory
            field or holds a value of the wrong JSON type. The message
            carries the parser diagnostic and the body.
    """
    try:
        # Strict: no string-to-number or string-to-bool coercion
        return response_model.model_validate_json(body_text, strict=True)
    except ValidationError as e:
        raise ResponseDecodeError(
            f"Failed to parse JSON response: {e}. Response body: {body_text}",
            status_code,
            body=body_text,
        ) from e


def classify_response(status_code: int, body_text: str, response_model: type[T]) -> T:
    """Classify a response and return the decoded model.

    Args:
        status_code: HTTP status code of the response.
        body_text: Full response body, read before any branching.
        response_model: Pydantic model class for a successful body.

    Returns:
        The decoded model on 2xx.
    """
    raise_for_status(status_code, body_text)
    return decode_body(status_code, body_text, response_model)
