"""Core data models shared across solscrape components."""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union


@dataclass(frozen=True)
class SourceFile:
    """A discovered source file and its location relative to the scan root."""

    path: Path
    relative_path: str


@dataclass(frozen=True)
class Cleaned:
    """Cleaned file content, optionally prefixed with a path header."""

    content: str


@dataclass(frozen=True)
class Empty:
    """The file had nothing left after comment and blank-line removal."""


@dataclass(frozen=True)
class ReadError:
    """The file could not be read; carries the underlying cause."""

    cause: Exception


ProcessOutcome = Union[Cleaned, Empty, ReadError]


@dataclass(frozen=True)
class AggregationResult:
    """Summary of a completed scrape run."""

    output_path: Path
    file_count: int
    line_count: int
    files_processed: Tuple[str, ...]
