"""Entry point tying source acquisition to the aggregation pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .aggregator import aggregate
from .config import ScrapeConfig, discovery_settings, load_config, merge_overrides
from .discovery import build_exclusions
from .errors import AcquisitionError
from .git.clone import RepoCloner, cloned_repository, extract_repo_name
from .logging import get_logger
from .models import AggregationResult


class Scraper:
    """Runs a scrape from a remote repository URL or a local directory.

    Keyword overrides passed to :meth:`scrape` take precedence over the
    ``.solscrape.yml`` found at the root of the source tree. For cloned
    repositories only the include, exclusion and header settings of that
    file are honoured.
    """

    def __init__(self, cloner: RepoCloner | None = None) -> None:
        self.cloner = cloner or RepoCloner()
        self.logger = get_logger("scraper")

    def scrape(self, source: str, *, local: bool = False, **overrides: Any) -> AggregationResult:
        if local:
            return self.scrape_from_local(source, **overrides)
        return self.scrape_from_url(source, **overrides)

    def scrape_from_url(self, url: str, **overrides: Any) -> AggregationResult:
        self.logger.info("Cloning repository...")
        with cloned_repository(url, self.cloner) as repo_path:
            self.logger.info("Processing files...")
            return self.scrape_directory(
                repo_path,
                default_name=extract_repo_name(url),
                trusted=False,
                **overrides,
            )

    def scrape_from_local(self, path: str, **overrides: Any) -> AggregationResult:
        source_path = Path(path).expanduser()
        if not source_path.exists():
            raise AcquisitionError(f"Source path does not exist: {path}")
        if not source_path.is_dir():
            raise AcquisitionError(f"Source path is not a directory: {path}")

        self.logger.info("Scanning local directory...")
        default_name = source_path.name or "local"
        return self.scrape_directory(source_path, default_name=default_name, **overrides)

    def scrape_directory(
        self,
        source_dir: Path,
        *,
        default_name: str,
        trusted: bool = True,
        **overrides: Any,
    ) -> AggregationResult:
        project_config = load_config(source_dir)
        if not trusted:
            # Cloned trees may not choose where or under which name output lands.
            project_config = discovery_settings(project_config)
        config = merge_overrides(project_config, **overrides)
        return run_pipeline(source_dir, config, default_name=default_name)


def run_pipeline(
    source_dir: Path, config: ScrapeConfig, *, default_name: str
) -> AggregationResult:
    """Aggregate ``source_dir`` into the output file described by ``config``."""
    return aggregate(
        source_dir,
        build_exclusions(config),
        config.add_headers,
        destination=Path(config.destination).expanduser(),
        output_name=config.output_name or default_name,
        extension=config.extension,
        output_suffix=config.output_suffix,
    )


__all__ = ["Scraper", "run_pipeline"]
