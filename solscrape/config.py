"""Configuration loading for solscrape (.solscrape.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".solscrape.yml"
DEFAULT_EXTENSION = ".sol"
DEFAULT_OUTPUT_SUFFIX = "_scraped.sol"


@dataclass(frozen=True)
class ScrapeConfig:
    """Settings that steer discovery, processing and output naming."""

    include_lib: bool = False
    include_test: bool = False
    include_script: bool = False
    no_headers: bool = False
    output_name: Optional[str] = None
    destination: str = "."
    extension: str = DEFAULT_EXTENSION
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX
    exclude_dirs: tuple[str, ...] = field(default_factory=tuple)

    @property
    def add_headers(self) -> bool:
        return not self.no_headers


def load_config(config_path: Path) -> ScrapeConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return ScrapeConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    include = _as_dict(data.get("include"))
    output = _as_dict(data.get("output"))

    extension = _as_str(data.get("extension")) or DEFAULT_EXTENSION
    if not extension.startswith("."):
        extension = f".{extension}"

    return ScrapeConfig(
        include_lib=_as_bool(include.get("lib")) or False,
        include_test=_as_bool(include.get("test")) or False,
        include_script=_as_bool(include.get("script")) or False,
        no_headers=_as_bool(output.get("headers")) is False,
        output_name=_as_str(output.get("name")),
        destination=_as_str(output.get("destination")) or ".",
        extension=extension,
        output_suffix=_as_str(output.get("suffix")) or DEFAULT_OUTPUT_SUFFIX,
        exclude_dirs=tuple(_as_str_list(data.get("exclude_dirs"))),
    )


def discovery_settings(config: ScrapeConfig) -> ScrapeConfig:
    """Return only the include, exclusion and header settings of ``config``.

    Output location, naming and extension fall back to their defaults.
    """
    return ScrapeConfig(
        include_lib=config.include_lib,
        include_test=config.include_test,
        include_script=config.include_script,
        no_headers=config.no_headers,
        exclude_dirs=config.exclude_dirs,
    )


def merge_overrides(config: ScrapeConfig, **overrides: Any) -> ScrapeConfig:
    """Return ``config`` with every override that is set (not ``None``/``False``) applied."""
    changes = {
        key: value
        for key, value in overrides.items()
        if value is not None and value is not False
    }
    unknown = set(changes) - set(ScrapeConfig.__dataclass_fields__)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
    return replace(config, **changes)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_EXTENSION",
    "DEFAULT_OUTPUT_SUFFIX",
    "ScrapeConfig",
    "discovery_settings",
    "load_config",
    "merge_overrides",
]
