"""Collection and copying of the files a component mounts at runtime."""

from __future__ import annotations

import glob
import logging
import os
import shutil
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from .assets import (
    AssetError,
    StrPath,
    create_dir,
    ensure_all_under,
    ensure_under,
    to_relative,
)

log = logging.getLogger(__name__)

_PLACEMENT_FIELDS = frozenset({"source", "destination"})


@dataclass(frozen=True)
class DirectoryPlacement:
    """A host directory, relative to the manifest, mounted at a guest path."""

    source: Path
    destination: PurePosixPath

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", Path(self.source))
        object.__setattr__(self, "destination", PurePosixPath(self.destination))


@dataclass(frozen=True)
class FileMount:
    """A file a component needs, and where the component expects it."""

    src: Path
    relative_dst: str


@dataclass(frozen=True)
class DirectoryMount:
    """A host directory made available to a component at a guest path."""

    host: Path
    guest: str


RawFileMount = str | DirectoryPlacement


def parse_file_mount(raw: Any) -> RawFileMount:
    """Interpret one entry of a component's ``files`` list.

    A string is a file path or glob pattern; a table with exactly ``source``
    and ``destination`` is a directory placement.
    """
    if isinstance(raw, (str, DirectoryPlacement)):
        return raw
    if isinstance(raw, Mapping):
        fields = set(raw)
        unknown = fields - _PLACEMENT_FIELDS
        if unknown:
            raise ValueError(f"unknown field(s) in file mount: {', '.join(sorted(unknown))}")
        missing = _PLACEMENT_FIELDS - fields
        if missing:
            raise ValueError(f"missing field(s) in file mount: {', '.join(sorted(missing))}")
        source, destination = raw["source"], raw["destination"]
        if not isinstance(source, str) or not isinstance(destination, str):
            raise ValueError("file mount source and destination must be strings")
        return DirectoryPlacement(Path(source), PurePosixPath(destination))
    raise ValueError(f"invalid file mount: {raw!r}")


def _is_absolute_guest_path(path: PurePosixPath) -> bool:
    # Guest paths follow Unix rules whatever the host filesystem is.
    return str(path).startswith("/")


def _collect_pattern(pattern: str, rel: Path) -> list[FileMount]:
    abs_pattern = rel / pattern
    log.debug("Resolving asset file pattern '%s'", abs_pattern)
    matches = sorted(glob.glob(str(abs_pattern), recursive=True, include_hidden=True))
    mounts = [FileMount(Path(match), to_relative(match, rel)) for match in matches]
    files = [mount for mount in mounts if mount.src.is_file()]
    ensure_all_under(rel, (mount.src for mount in files))
    return files


def _walk_files(directory: Path) -> list[Path]:
    def fail(exc: OSError) -> None:
        raise AssetError(f"Failed to walk directory under {directory}") from exc

    found = []
    for dirpath, _dirnames, filenames in os.walk(directory, onerror=fail):
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.is_file() and not path.is_symlink():
                found.append(path)
    return sorted(found)


def _collect_placement(placement: DirectoryPlacement, rel: Path) -> list[FileMount]:
    source = placement.source
    guest_path = placement.destination
    if source.is_absolute():
        raise AssetError(f"Cannot place {source}: source paths must be relative")
    if not _is_absolute_guest_path(guest_path):
        raise AssetError(f"Cannot place at {guest_path}: guest paths must be absolute")
    relative_guest_path = PurePosixPath(*guest_path.parts[1:])

    abs_dir = rel / source
    if not abs_dir.is_dir():
        raise AssetError(f"Cannot place {abs_dir}: source must be a directory")

    mounts = []
    for file in _walk_files(abs_dir):
        try:
            relative = to_relative(file, abs_dir)
        except AssetError as exc:
            raise AssetError(f"Failed to establish relative path for '{file}'") from exc
        mounts.append(FileMount(file, str(relative_guest_path / relative)))
    return mounts


def collect(raw_mounts: Iterable[Any], rel: StrPath) -> list[FileMount]:
    """Return the file mounts for all patterns, then all directory placements."""
    rel = Path(rel)
    entries = [parse_file_mount(raw) for raw in raw_mounts]
    patterns = [entry for entry in entries if isinstance(entry, str)]
    placements = [entry for entry in entries if isinstance(entry, DirectoryPlacement)]

    files: list[FileMount] = []
    for pattern in patterns:
        try:
            files.extend(_collect_pattern(pattern, rel))
        except (AssetError, OSError) as exc:
            raise AssetError(f"Failed to collect file mounts for {pattern}: {exc}") from exc
    for placement in placements:
        try:
            files.extend(_collect_placement(placement, rel))
        except (AssetError, OSError) as exc:
            raise AssetError(
                f"Failed to collect file mounts for {placement.source}: {exc}"
            ) from exc
    return files


def _copy(file: FileMount, directory: Path) -> None:
    target = directory / file.relative_dst
    ensure_under(directory, target)
    log.debug("Copying asset file '%s' -> '%s'", file.src, target)
    target.parent.mkdir(parents=True, exist_ok=True)
    try:
        shutil.copy(file.src, target)
    except OSError as exc:
        raise AssetError(f"Error copying asset file '{file.src}'") from exc


def copy_all(files: Iterable[FileMount], directory: StrPath) -> None:
    """Copy every file into the directory; raise if any could not be copied."""
    directory = Path(directory)
    failed = 0
    for file in files:
        try:
            _copy(file, directory)
        except (AssetError, OSError) as exc:
            log.error("%s", exc)
            failed += 1
    if failed:
        raise AssetError(f"Error copying assets: {failed} file(s) not copied")


def prepare_component(
    raw_mounts: Iterable[Any],
    src: StrPath,
    base_dst: StrPath,
    component_id: str,
) -> list[DirectoryMount]:
    """Copy a component's files into its asset directory and return the mount."""
    log.info("Mounting files from '%s' to '%s'", src, base_dst)
    files = collect(raw_mounts, src)
    host = create_dir(base_dst, component_id)
    copy_all(files, host)
    return [DirectoryMount(host=host, guest="/")]