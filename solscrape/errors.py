"""Failure types raised by the scraping pipeline."""

from __future__ import annotations


class ScrapeError(RuntimeError):
    """Base class for fatal scraping failures."""


class ConfigError(ScrapeError):
    """Raised when the configuration file cannot be parsed."""


class AcquisitionError(ScrapeError):
    """Raised when the source tree cannot be cloned or opened."""


class DiscoveryError(ScrapeError):
    """Raised when a directory cannot be listed during the walk."""


class NoFilesFoundError(ScrapeError):
    """Raised when discovery yields no matching source files."""

    def __init__(self, message: str = "No Solidity files found in the source") -> None:
        super().__init__(message)


class AllFilesEmptyError(ScrapeError):
    """Raised when every discovered file was unreadable or empty after cleaning."""

    def __init__(
        self, message: str = "All Solidity files were empty after processing"
    ) -> None:
        super().__init__(message)


class OutputWriteError(ScrapeError):
    """Raised when the destination directory or output file cannot be written."""


__all__ = [
    "AcquisitionError",
    "AllFilesEmptyError",
    "ConfigError",
    "DiscoveryError",
    "NoFilesFoundError",
    "OutputWriteError",
    "ScrapeError",
]
