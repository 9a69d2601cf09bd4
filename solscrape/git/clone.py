"""Shallow cloning of remote repositories into scoped temporary directories."""

from __future__ import annotations

import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Iterator

from ..errors import AcquisitionError
from ..logging import get_logger

logger = get_logger("git")


class RepoCloner:
    """Runs ``git clone --depth 1`` through an injectable command runner."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner

    def clone(self, url: str, target_dir: Path) -> None:
        args = ["git", "clone", "--depth", "1", url, str(target_dir)]
        logger.debug("Running %s", " ".join(args))
        try:
            self._runner(args, cwd=None, capture_output=True)
        except FileNotFoundError as exc:
            raise AcquisitionError(
                "Git is not installed or not in PATH. Please install Git first."
            ) from exc
        except subprocess.CalledProcessError as exc:
            stderr = exc.stderr or ""
            if isinstance(stderr, bytes):
                stderr = stderr.decode("utf-8", errors="replace")
            raise AcquisitionError(f"Git clone failed: {stderr.strip()}") from exc
        except OSError as exc:
            raise AcquisitionError(f"Failed to execute git: {exc}") from exc

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path | None = None,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd) if cwd is not None else None,
            check=True,
            text=True,
            capture_output=capture_output,
        )
        return completed.stdout if capture_output else ""


@contextmanager
def cloned_repository(url: str, cloner: RepoCloner | None = None) -> Iterator[Path]:
    """Clone ``url`` into a temporary directory that is removed on exit."""
    active = cloner or RepoCloner()
    try:
        temp_dir = tempfile.TemporaryDirectory(prefix="solscrape_")
    except OSError as exc:
        raise AcquisitionError(f"Failed to create temp dir: {exc}") from exc
    with temp_dir as raw_path:
        target = Path(raw_path)
        active.clone(url, target)
        yield target
    logger.debug("Removed temporary clone for %s", url)


def extract_repo_name(url: str) -> str:
    """Return the repository name from a clone URL (``.../name.git`` -> ``name``)."""
    trimmed = url.rstrip("/")
    while trimmed.endswith(".git"):
        trimmed = trimmed[: -len(".git")]
    return trimmed.rsplit("/", 1)[-1] or "repository"


__all__ = ["RepoCloner", "cloned_repository", "extract_repo_name"]
