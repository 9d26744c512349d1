"""Helpers for placing component asset files in a local directory."""

from __future__ import annotations

import hashlib
import re
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

StrPath = str | PathLike[str]

_UNSAFE_CHARACTERS = re.compile(r"[^-_a-zA-Z0-9]")


class AssetError(Exception):
    """An asset could not be prepared or lies outside its directory."""


def create_dir(base: StrPath, component_id: str) -> Path:
    """Create and return the asset directory for a component under ``base``."""
    directory = Path(base) / "assets" / component_dir(component_id)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise AssetError(
            f"Error creating temporary asset directory {directory}"
        ) from exc
    return directory


def to_relative(path: StrPath, relative_to: StrPath) -> str:
    """Return ``path`` relative to ``relative_to``, with '/' separators."""
    path, relative_to = Path(path), Path(relative_to)
    if not path.is_relative_to(relative_to):
        raise AssetError(
            f"Copied path '{path}' did not belong with expected prefix '{relative_to}'"
        )
    rel = path.relative_to(relative_to)
    if not rel.parts:
        return ""
    return str(rel).replace("\\", "/")


def is_under(desired: StrPath, actual: StrPath) -> bool:
    """Return True if ``actual`` lies under ``desired`` and contains no '..'."""
    return Path(actual).is_relative_to(Path(desired)) and ".." not in str(actual)


def ensure_under(desired: StrPath, actual: StrPath) -> None:
    """Raise AssetError unless ``actual`` lies under ``desired``."""
    if not is_under(desired, actual):
        raise AssetError(
            f"Error copying assets: copy to '{actual}' outside the application directory"
        )


def ensure_all_under(desired: StrPath, paths: Iterable[StrPath]) -> None:
    """Raise AssetError if any of ``paths`` lies outside ``desired``."""
    outside = sum(1 for p in paths if not is_under(desired, p))
    if outside:
        raise AssetError(
            f"Error copying assets: {outside} file(s) were outside the application directory"
        )


def component_dir(component_id: str) -> str:
    """Return a directory name built from the sanitized id and its SHA-256."""
    return f"{_UNSAFE_CHARACTERS.sub('_', component_id)}_{sha256_hex(component_id)}"


def sha256_hex(text: str) -> str:
    """Return the lowercase hex SHA-256 digest of the UTF-8 text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()