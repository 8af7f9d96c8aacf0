"""Configuration helpers for the datadome command line tools."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

LOGGER = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when configuration files are missing or malformed."""


_SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}


def load_configuration(path: str | Path) -> Dict[str, Any]:
    """Load configuration data from a JSON or YAML file."""

    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file '{file_path}' was not found")

    if file_path.suffix.lower() not in _SUPPORTED_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported configuration format '{file_path.suffix}'. Supported extensions: {sorted(_SUPPORTED_EXTENSIONS)}"
        )

    text = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix.lower() == ".json":
            data = json.loads(text) if text.strip() else {}
        else:
            data = yaml.safe_load(text) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Configuration file '{file_path}' could not be parsed: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a mapping")
    return data


@dataclass
class Settings:
    """Runtime settings shared by the CLI commands."""

    store_path: Path = Path("datadome.json")
    share_base_url: str = "https://datadome.ng"
    log_level: str = "INFO"

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Settings":
        data = dict(data or {})
        unknown = sorted(set(data) - {"store_path", "share_base_url", "log_level"})
        for key in unknown:
            LOGGER.debug("Ignoring unknown configuration key %s", key)
        defaults = cls()
        return cls(
            store_path=Path(data.get("store_path") or defaults.store_path),
            share_base_url=str(data.get("share_base_url") or defaults.share_base_url),
            log_level=str(data.get("log_level") or defaults.log_level).upper(),
        )


__all__ = ["ConfigurationError", "Settings", "load_configuration"]
