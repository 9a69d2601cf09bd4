"""Source file discovery and directory exclusion rules."""

from __future__ import annotations

import os
from pathlib import Path
from typing import AbstractSet, Iterator, List

from .config import DEFAULT_EXTENSION, ScrapeConfig
from .errors import DiscoveryError
from .models import SourceFile

_BASE_EXCLUDED_DIRS = frozenset(
    {
        ".git",
        "node_modules",
        "out",
        "cache",
        "artifacts",
        "build",
        "coverage",
        ".deps",
        "dependencies",
    }
)

_LIB_DIRS = ("lib",)
_TEST_DIRS = ("test", "tests", "Test", "Tests")
_SCRIPT_DIRS = ("script", "scripts", "Script", "Scripts")


def build_exclusions(config: ScrapeConfig) -> frozenset[str]:
    """Return the directory names the walk must not descend into."""
    excluded = set(_BASE_EXCLUDED_DIRS)
    if not config.include_lib:
        excluded.update(_LIB_DIRS)
    if not config.include_test:
        excluded.update(_TEST_DIRS)
    if not config.include_script:
        excluded.update(_SCRIPT_DIRS)
    excluded.update(name for name in config.exclude_dirs if name)
    return frozenset(excluded)


def _raise_walk_error(error: OSError) -> None:
    target = error.filename or "directory"
    raise DiscoveryError(f"Failed to scan directory {target}: {error.strerror or error}") from error


def _is_cycle(real_current: str, child: str) -> bool:
    real_child = os.path.realpath(child)
    return os.path.commonpath([real_current, real_child]) == real_child


def _iter_files(root: Path, excluded: AbstractSet[str], extension: str) -> Iterator[Path]:
    # Symlinked directories are followed; a link back to one of its own ancestors is not.
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error, followlinks=True):
        real_current = os.path.realpath(dirpath)
        dirnames[:] = [
            name
            for name in dirnames
            if name not in excluded and not _is_cycle(real_current, os.path.join(dirpath, name))
        ]
        current_dir = Path(dirpath)
        for filename in filenames:
            path = current_dir / filename
            if path.suffix == extension and path.is_file():
                yield path


def discover(
    root: Path, excluded: AbstractSet[str], extension: str = DEFAULT_EXTENSION
) -> List[Path]:
    """Return every matching file under ``root`` sorted by full path.

    Directories whose bare name is in ``excluded`` are skipped along with
    their whole subtree. A directory that cannot be listed raises
    :class:`DiscoveryError`.
    """
    if not root.is_dir():
        return []
    return sorted(_iter_files(root, excluded, extension))


def discover_sources(
    root: Path, excluded: AbstractSet[str], extension: str = DEFAULT_EXTENSION
) -> List[SourceFile]:
    """Like :func:`discover` but pairs each path with its root-relative form."""
    return [
        SourceFile(path=path, relative_path=relative_to(path, root))
        for path in discover(root, excluded, extension)
    ]


def relative_to(path: Path, base: Path) -> str:
    """Return ``path`` relative to ``base`` or the full path if it lies outside."""
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


__all__ = ["build_exclusions", "discover", "discover_sources", "relative_to"]
