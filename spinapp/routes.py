"""Route matching for HTTP components."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar
from urllib.parse import urlsplit

C = TypeVar("C")

_WILDCARD_SUFFIX = "/..."


class RouteNotFoundError(LookupError):
    """No route matches the requested path."""


def _sanitize(text: str) -> str:
    """Strip a single trailing slash."""
    return text[:-1] if text.endswith("/") else text


def sanitize_with_base(base: str, path: str) -> str:
    """Join a sanitized base and a sanitized path."""
    return f"{_sanitize(base)}{_sanitize(path)}"


@dataclass(frozen=True, order=True)
class RoutePattern:
    """An exact route, or a wildcard route matching a prefix and below."""

    path: str
    wildcard: bool = False

    @classmethod
    def from_parts(cls, base: str, path: str) -> RoutePattern:
        """Build a pattern from a base path and a component route."""
        full = sanitize_with_base(base, path)
        if full.endswith(_WILDCARD_SUFFIX):
            return cls(full[: -len(_WILDCARD_SUFFIX)], wildcard=True)
        return cls(full)

    def matches(self, path: str) -> bool:
        """Return True if the pattern handles the given path."""
        candidate = _sanitize(path)
        if self.wildcard:
            return candidate == self.path or candidate.startswith(f"{self.path}/")
        return candidate == self.path

    def relative(self, uri: str) -> str:
        """Return the part of the URI path after the matched prefix."""
        uri_path = urlsplit(uri).path
        if uri_path.startswith(self.path):
            return uri_path[len(self.path) :]
        return ""

    def __str__(self) -> str:
        return f"{self.path} (wildcard)" if self.wildcard else self.path


class Router(Generic[C]):
    """Ordered mapping from route patterns to the components that handle them."""

    def __init__(
        self,
        routes: Mapping[RoutePattern, C] | Iterable[tuple[RoutePattern, C]] = (),
    ) -> None:
        self.routes: dict[RoutePattern, C] = dict(routes)

    def route(self, path: str) -> C:
        """Return the last registered component whose pattern matches the path."""
        matched: Any = _MISSING
        for pattern, component in self.routes.items():
            if pattern.matches(path):
                matched = component
        if matched is _MISSING:
            raise RouteNotFoundError(f"Cannot match route for path {path}")
        return matched

    def __iter__(self) -> Iterator[RoutePattern]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)

    def __repr__(self) -> str:
        return f"Router({self.routes!r})"


_MISSING = object()