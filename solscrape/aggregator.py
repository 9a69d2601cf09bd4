"""Drives discovery and processing and writes the aggregate document."""

from __future__ import annotations

from pathlib import Path
from typing import AbstractSet, List

from .config import DEFAULT_EXTENSION, DEFAULT_OUTPUT_SUFFIX
from .discovery import discover_sources
from .errors import AllFilesEmptyError, NoFilesFoundError, OutputWriteError
from .logging import get_logger
from .models import AggregationResult, Cleaned, ReadError
from .processor import process_file

logger = get_logger("aggregator")


def aggregate(
    source_root: Path,
    excluded: AbstractSet[str],
    add_header: bool,
    *,
    destination: Path,
    output_name: str,
    extension: str = DEFAULT_EXTENSION,
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX,
) -> AggregationResult:
    """Clean every source file under ``source_root`` into one output file.

    Files are visited in sorted path order. Unreadable files are logged and
    skipped; files that clean to nothing are skipped silently. The output is
    only written once the whole document has been assembled.
    """
    sources = discover_sources(source_root, excluded, extension)
    if not sources:
        raise NoFilesFoundError()
    logger.debug("Discovered %d source files under %s", len(sources), source_root)

    parts: List[str] = []
    files_processed: List[str] = []
    for source in sources:
        outcome = process_file(source.path, source_root, add_header)
        if isinstance(outcome, Cleaned):
            parts.append(outcome.content)
            files_processed.append(source.relative_path)
        elif isinstance(outcome, ReadError):
            logger.warning("Could not read %s: %s", source.relative_path, outcome.cause)
        else:
            logger.debug("Skipping %s: empty after cleaning", source.relative_path)

    if not parts:
        raise AllFilesEmptyError()

    final_code = "\n".join(parts)
    output_path = write_output(final_code, destination, f"{output_name}{output_suffix}")

    return AggregationResult(
        output_path=output_path,
        file_count=len(files_processed),
        line_count=count_lines(final_code),
        files_processed=tuple(files_processed),
    )


def write_output(document: str, destination: Path, filename: str) -> Path:
    """Write ``document`` to ``destination/filename``, creating directories as needed."""
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(f"Failed to create destination: {exc}") from exc

    output_path = destination / filename
    try:
        with output_path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(document)
    except OSError as exc:
        raise OutputWriteError(f"Failed to write output: {exc}") from exc
    logger.debug("Wrote %d characters to %s", len(document), output_path)
    return output_path


def count_lines(text: str) -> int:
    """Count newline-terminated lines, treating a final unterminated line as one."""
    if not text:
        return 0
    newlines = text.count("\n")
    return newlines if text.endswith("\n") else newlines + 1


__all__ = ["aggregate", "count_lines", "write_output"]
