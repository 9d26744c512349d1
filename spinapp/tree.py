"""Configuration trees: paths, slots and their merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from functools import total_ordering
from typing import Any

from .keys import InvalidPathError, InvalidSchemaError, Key, validate_key
from .template import Template


@total_ordering
class TreePath:
    """A dot-separated path into a configuration tree."""

    __slots__ = ("_path",)

    def __init__(self, path: str) -> None:
        if not path:
            raise InvalidPathError("empty")
        for key in path.split("."):
            validate_key(key)
        self._path = path

    @classmethod
    def _unchecked(cls, path: str) -> TreePath:
        obj = cls.__new__(cls)
        obj._path = path
        return obj

    def size(self) -> int:
        """Return the number of keys in this path."""
        return self._path.count(".") + 1

    def resolve_relative(self, rel: str) -> TreePath:
        """Resolve a relative path that starts with at least one '.'."""
        if not rel:
            raise InvalidPathError("rel may not be empty")
        key = rel.lstrip(".")
        dots = len(rel) - len(key)
        if dots == 0:
            raise InvalidPathError("rel must start with a '.'")
        cut_points = [i for i in range(len(self._path) - 1, -1, -1) if self._path[i] == "."]
        cut_points.append(0)
        if dots > len(cut_points):
            raise InvalidPathError(
                f"rel has too many dots relative to base path {self}"
            )
        idx = cut_points[dots - 1]
        if idx == 0:
            return TreePath._unchecked(key)
        return TreePath._unchecked(f"{self._path[:idx]}.{key}")

    def keys(self) -> Iterator[Key]:
        """Iterate over the keys of this path."""
        return (Key(part) for part in self._path.split("."))

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"TreePath({self._path!r})"

    def __add__(self, other: object) -> TreePath:
        if isinstance(other, (TreePath, Key)):
            return TreePath._unchecked(f"{self._path}.{other}")
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreePath):
            return NotImplemented
        return self._path == other._path

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TreePath):
            return NotImplemented
        return self._path < other._path

    def __hash__(self) -> int:
        return hash(self._path)


@dataclass
class Slot:
    """A configuration slot: an optional default template and a secret flag."""

    secret: bool = False
    default: Template | None = None

    @classmethod
    def from_default(cls, default: str) -> Slot:
        """Create a slot holding the given default template."""
        return cls(default=Template(default))

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> Slot:
        """Create a slot from a raw mapping with default, required and secret."""
        if not isinstance(raw, Mapping):
            raise InvalidSchemaError(f"slot must be a table, got {raw!r}")
        default = raw.get("default")
        required = bool(raw.get("required", False))
        secret = bool(raw.get("secret", False))
        if default is not None:
            return cls(secret=secret, default=Template(str(default)))
        if not required:
            raise InvalidSchemaError("slot must have a default if not required")
        return cls(secret=secret, default=None)

    def to_raw(self) -> dict[str, Any]:
        """Return the raw mapping form of this slot."""
        return {
            "default": None if self.default is None else str(self.default),
            "required": self.default is None,
            "secret": self.secret,
        }

    def __repr__(self) -> str:
        if self.default is not None and self.secret:
            shown = "<SECRET>"
        else:
            shown = repr(self.default)
        return f"Slot(secret={self.secret}, default={shown})"


class Tree:
    """A configuration tree mapping paths to slots."""

    def __init__(self, slots: Mapping[TreePath, Slot] | None = None) -> None:
        self._slots: dict[TreePath, Slot] = dict(slots or {})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, Any]]) -> Tree:
        """Build a tree from a mapping of path strings to raw slots."""
        return cls({TreePath(path): Slot.from_raw(raw) for path, raw in data.items()})

    def get(self, path: TreePath) -> Slot:
        """Return the slot at the given path."""
        try:
            return self._slots[path]
        except KeyError:
            raise InvalidPathError(f"no slot at path: {path}") from None

    def merge(self, base: TreePath, other: Tree) -> None:
        """Merge another tree in below the given base path."""
        for subpath, slot in sorted(other._slots.items(), key=lambda item: item[0]):
            self._merge_slot(base + subpath, slot)

    def merge_defaults(
        self,
        base: TreePath,
        defaults: Mapping[str, str] | Iterable[tuple[str, str]],
    ) -> None:
        """Add default-valued slots for each key below the given base path."""
        items = defaults.items() if isinstance(defaults, Mapping) else defaults
        for key, default in items:
            path = base + Key(key)
            self._merge_slot(path, Slot.from_default(default))

    def _merge_slot(self, path: TreePath, slot: Slot) -> None:
        if path in self._slots:
            raise InvalidPathError(f"duplicate key at path: {path}")
        self._slots[path] = slot

    def __contains__(self, path: object) -> bool:
        return path in self._slots

    def __iter__(self) -> Iterator[TreePath]:
        return iter(sorted(self._slots))

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        inner = ", ".join(f"{path}: {self._slots[path]!r}" for path in self)
        return f"Tree({{{inner}}})"