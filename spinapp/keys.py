"""Configuration keys and the errors raised while resolving configuration."""

from __future__ import annotations

import string
from dataclasses import dataclass

_LOWER = frozenset(string.ascii_lowercase)
_ALNUM = frozenset(string.ascii_letters + string.digits)
_ALLOWED = frozenset(string.ascii_lowercase + string.digits + "_")


class ConfigError(Exception):
    """Base class for configuration resolution errors."""

    prefix = "config error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"


class InvalidKeyError(ConfigError):
    """A configuration key is malformed."""

    prefix = "invalid config key"


class InvalidPathError(ConfigError):
    """A configuration path is malformed or missing."""

    prefix = "invalid config path"


class InvalidSchemaError(ConfigError):
    """A configuration schema entry is malformed."""

    prefix = "invalid config schema"


class InvalidTemplateError(ConfigError):
    """A configuration template is malformed or cannot be expanded."""

    prefix = "invalid config template"


class ProviderError(ConfigError):
    """A configuration provider failed."""

    prefix = "provider error"


class UnknownPathError(ConfigError):
    """A configuration path is not known."""

    prefix = "unknown config path"


def validate_key(key: str) -> None:
    """Raise InvalidKeyError unless ``key`` is a valid configuration key.

    A key starts with a lowercase ASCII letter, ends with an ASCII
    alphanumeric character, holds only lowercase letters, digits and single
    underscores.
    """
    if not key:
        raise InvalidKeyError("may not be empty")
    if key[0] not in _LOWER:
        raise InvalidKeyError("must start with an ASCII letter")
    if key[-1] not in _ALNUM:
        raise InvalidKeyError("must end with an ASCII alphanumeric char")
    if "__" in key:
        raise InvalidKeyError("may not contain multiple consecutive underscores")
    invalid = next((c for c in key if c not in _ALLOWED), None)
    if invalid is not None:
        raise InvalidKeyError(f"invalid character {invalid!r}")


@dataclass(frozen=True)
class Key:
    """A validated configuration key."""

    name: str

    def __post_init__(self) -> None:
        validate_key(self.name)

    def __str__(self) -> str:
        return self.name