"""Project root detection by upward search for marker files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


def _start_directory(start: Path) -> Path:
    start = start.absolute()
    return start if start.is_dir() else start.parent


def find_root_marker(start: Path | str, markers: Sequence[str]) -> tuple[Path, str] | None:
    """Return ``(directory, marker)`` for the nearest ancestor holding any marker.

    Directories are checked from ``start`` upward; within one directory the
    markers are tried in the given order. None if no ancestor matches.
    """
    if not markers:
        return None
    directory = _start_directory(Path(start))
    for candidate in (directory, *directory.parents):
        for marker in markers:
            if (candidate / marker).exists():
                return candidate, marker
    return None


def find_root(start: Path | str, markers: Sequence[str], cwd: Path | None = None) -> Path:
    """Resolve the project root for ``start``, falling back to ``cwd``."""
    found = find_root_marker(start, markers)
    if found is not None:
        return found[0]
    return cwd if cwd is not None else Path.cwd()
