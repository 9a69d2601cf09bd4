"""Per-file reading, cleaning and header decoration."""

from __future__ import annotations

from pathlib import Path

from .cleaner import clean
from .discovery import relative_to
from .models import Cleaned, Empty, ProcessOutcome, ReadError

HEADER_SEPARATOR = "// " + "═" * 70


def format_header(relative_path: str) -> str:
    """Return the three-line banner that precedes a file's content."""
    return f"{HEADER_SEPARATOR}\n// File: {relative_path}\n{HEADER_SEPARATOR}"


def process_file(path: Path, base_dir: Path, add_header: bool) -> ProcessOutcome:
    """Read, clean and optionally decorate one source file.

    Read failures are returned as :class:`ReadError` rather than raised so a
    single bad file never aborts the run.
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        return ReadError(cause=exc)

    cleaned = clean(content)
    if not cleaned.strip():
        return Empty()

    if add_header:
        return Cleaned(content=f"{format_header(relative_to(path, base_dir))}\n{cleaned}")
    return Cleaned(content=cleaned)


__all__ = ["HEADER_SEPARATOR", "format_header", "process_file"]
