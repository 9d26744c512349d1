"""Request information passed to components as headers or environment variables."""

from __future__ import annotations

from enum import Enum
from urllib.parse import SplitResult, urlsplit

from .routes import RoutePattern, sanitize_with_base

DEFAULT_HOST = "localhost"

_WILDCARD_SUFFIX = "/..."
_AUTHORITY_FORBIDDEN = frozenset(' \t\r\n/?#"<>\\^`{|}')


class HeaderName(Enum):
    """Names of a piece of request information: (Spin header, Wagi variable)."""

    PATH_INFO = ("SPIN_PATH_INFO", "PATH_INFO")
    FULL_URL = ("SPIN_FULL_URL", "X_FULL_URL")
    MATCHED_ROUTE = ("SPIN_MATCHED_ROUTE", "X_MATCHED_ROUTE")
    BASE_PATH = ("SPIN_BASE_PATH", "X_BASE_PATH")
    RAW_COMPONENT_ROUTE = ("SPIN_RAW_COMPONENT_ROUTE", "X_RAW_COMPONENT_ROUTE")
    COMPONENT_ROUTE = ("SPIN_COMPONENT_ROUTE", "X_COMPONENT_ROUTE")

    @property
    def spin(self) -> str:
        """The name used by the Spin executor."""
        return self.value[0]

    @property
    def wagi(self) -> str:
        """The name used by the Wagi executor."""
        return self.value[1]


def _path_and_query(parts: SplitResult) -> str:
    path = parts.path or "/"
    return f"{path}?{parts.query}" if parts.query else path


def compute_default_headers(
    uri: str, raw: str, base: str, host: str
) -> list[tuple[HeaderName, str]]:
    """Compute the default request information for a component route."""
    parts = urlsplit(uri)
    abs_path = _path_and_query(parts)

    path_info = RoutePattern.from_parts(base, raw).relative(abs_path)
    scheme = parts.scheme or "http"
    full_url = f"{scheme}://{host}{abs_path}"
    matched_route = sanitize_with_base(base, raw)
    component_route = raw.removesuffix(_WILDCARD_SUFFIX)

    return [
        (HeaderName.PATH_INFO, path_info),
        (HeaderName.FULL_URL, full_url),
        (HeaderName.MATCHED_ROUTE, matched_route),
        (HeaderName.BASE_PATH, base),
        (HeaderName.RAW_COMPONENT_ROUTE, raw),
        (HeaderName.COMPONENT_ROUTE, component_route),
    ]


def absolute_uri(uri: str, scheme: str, host: str | None = None) -> str:
    """Return the request URI with the given scheme and the host as authority.

    The host defaults to ``localhost`` when the request has no Host header.
    """
    authority = DEFAULT_HOST if host is None else host
    if not authority or any(c in _AUTHORITY_FORBIDDEN for c in authority):
        raise ValueError(f"Invalid authority {authority!r}")
    return f"{scheme}://{authority}{_path_and_query(urlsplit(uri))}"