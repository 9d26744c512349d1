"""Configuration value providers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping

from .keys import Key

DEFAULT_PREFIX = "SPIN_APP"


class Provider(ABC):
    """A source of top-level configuration values."""

    @abstractmethod
    def get(self, key: Key) -> str | None:
        """Return the value for the given key, or None if absent."""


class EnvProvider(Provider):
    """A provider that reads values from environment variables."""

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.prefix = prefix
        self._environ = environ

    def get(self, key: Key) -> str | None:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(f"{self.prefix}_{str(key).upper()}")

    def __repr__(self) -> str:
        return f"EnvProvider(prefix={self.prefix!r})"