"""Request construction for the FACEIT Data API.

URL assembly, query-string building and bearer header injection are kept
as pure functions so they can be exercised without a transport.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

API_PREFIX = "/data/v4"

QueryValue = str | int | Sequence[str] | None


def build_url(base_url: str, path: str) -> str:
    """Build the fully-qualified URL for an API path.

    Args:
        base_url: API host (e.g. "https://open.faceit.com").
        path: Resource path with path parameters already substituted
            (e.g. "/players/abc"). Identifiers are used verbatim.

    Returns:
        The absolute URL under the Data API v4 prefix.
    """
    return f"{base_url.rstrip('/')}{API_PREFIX}{path}"


def build_query(params: Mapping[str, QueryValue] | None) -> list[tuple[str, str]]:
    """Convert optional query parameters into ordered query pairs.

    Parameters whose value is ``None`` are left out entirely; the API applies
    its own defaults only when a parameter is absent. Values are not range
    checked, out-of-range values are passed through for the API to reject.

    Args:
        params: Mapping of query parameter name to value. Integers are
            rendered in plain decimal, sequences of strings are joined
            with commas.

    Returns:
        List of (name, value) pairs in insertion order.
    """
    if not params:
        return []

    query: list[tuple[str, str]] = []
    for name, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            raise TypeError(f"Unsupported query value for {name!r}: {value!r}")
        if isinstance(value, int):
            query.append((name, str(value)))
        elif isinstance(value, str):
            query.append((name, value))
        else:
            query.append((name, ",".join(value)))
    return query


def build_request(
    base_url: str,
    path: str,
    params: Mapping[str, QueryValue] | None = None,
) -> tuple[str, list[tuple[str, str]]]:
    """Build the URL and query pairs for one API call."""
    return build_url(base_url, path), build_query(params)


def auth_headers(credential: str | None) -> dict[str, str]:
    """Return the Authorization header for a bearer credential.

    API keys and OAuth2 access tokens are sent the same way.

    Args:
        credential: The configured credential, or None.

    Returns:
        ``{"Authorization": "Bearer <credential>"}`` or an empty dict.
    """
    if credential is None:
        return {}
    return {"Authorization": f"Bearer {credential}"}
