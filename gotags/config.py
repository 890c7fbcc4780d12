"""Configuration loading for gotags (.gotags.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .writer import WriteMode

CONFIG_FILENAME = ".gotags.yml"

RECORD_STYLES = ("plain", "etags")
PARSE_ERROR_POLICIES = ("abort", "skip")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class TagsConfig:
    """Settings for one tagging run."""

    output_dir: Path
    output_name: str = "TAGS"
    append: bool = False
    record_style: str = "plain"
    on_parse_error: str = "abort"
    cache_lines: bool = False
    recursive: bool = False
    exclude_paths: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.record_style not in RECORD_STYLES:
            raise ConfigError(
                f"record_style must be one of {', '.join(RECORD_STYLES)}, got {self.record_style!r}"
            )
        if self.on_parse_error not in PARSE_ERROR_POLICIES:
            raise ConfigError(
                "on_parse_error must be one of "
                f"{', '.join(PARSE_ERROR_POLICIES)}, got {self.on_parse_error!r}"
            )
        if not self.output_name:
            raise ConfigError("output_name must not be empty")

    @property
    def destination(self) -> Path:
        return self.output_dir / self.output_name

    @property
    def write_mode(self) -> WriteMode:
        return WriteMode.APPEND if self.append else WriteMode.CREATE


def load_config(config_path: Path) -> TagsConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return TagsConfig(output_dir=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output_data = _as_dict(data.get("output"))
    output_dir_str = _as_str(output_data.get("dir"))
    output_dir = (root / output_dir_str).resolve() if output_dir_str else root
    output_name = _as_str(output_data.get("name")) or "TAGS"
    append = _as_bool(output_data.get("append")) or False
    record_style = _as_str(output_data.get("style")) or "plain"

    sources_data = _as_dict(data.get("sources"))
    recursive = _as_bool(sources_data.get("recursive")) or False
    exclude_paths = _as_str_list(sources_data.get("exclude_paths"))

    on_parse_error = _as_str(data.get("on_parse_error")) or "abort"
    cache_lines = _as_bool(data.get("cache_lines")) or False

    return TagsConfig(
        output_dir=output_dir,
        output_name=output_name,
        append=append,
        record_style=record_style,
        on_parse_error=on_parse_error,
        cache_lines=cache_lines,
        recursive=recursive,
        exclude_paths=exclude_paths,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


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


__all__ = ["CONFIG_FILENAME", "ConfigError", "TagsConfig", "load_config"]
