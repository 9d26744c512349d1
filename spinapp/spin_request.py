"""Preparation of requests for components run by the Spin executor."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from urllib.parse import parse_qsl, urlsplit

from .headers import DEFAULT_HOST, compute_default_headers

HeaderInput = Mapping[str, str | bytes] | Iterable[tuple[str, str | bytes]]


def prepare_header_key(key: str) -> str:
    """Turn an information name into a lowercase, dash-separated header key."""
    return key.replace("_", "-").lower()


def _as_text(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def request_headers(
    headers: HeaderInput, uri: str, raw: str, base: str
) -> list[tuple[str, str]]:
    """Return the request's headers followed by the Spin default headers.

    Header values given as bytes must be valid UTF-8.
    """
    items = headers.items() if isinstance(headers, Mapping) else headers
    result = [(name.lower(), _as_text(value)) for name, value in items]

    host = next((value for name, value in result if name == "host"), DEFAULT_HOST)
    result.extend(
        (prepare_header_key(name.spin), value)
        for name, value in compute_default_headers(uri, raw, base, host)
    )
    return result


def query_params(uri: str) -> list[tuple[str, str]]:
    """Decode the query string of the URI as form-encoded key/value pairs."""
    query = urlsplit(uri).query
    if not query:
        return []
    return parse_qsl(query, keep_blank_values=True)


def valid_status(status: int) -> bool:
    """Return True if a component's response status is acceptable."""
    return 100 <= status <= 600