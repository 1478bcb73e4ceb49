"""
Configuration Management

Loads configuration from YAML files with environment variable resolution.
"""

import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


class InstructionsConfig(BaseModel):
    """Instructions document configuration."""
    source: Optional[str] = None
    timeout_seconds: float = 10.0


class OutputConfig(BaseModel):
    """Output generation configuration."""
    directory: str = "./outputs"
    formats: list[str] = Field(default_factory=lambda: ["csv", "markdown", "json"])
    timestamp_filenames: bool = True


class DisplayConfig(BaseModel):
    """Terminal rendering configuration."""
    show_all_sections: bool = False
    max_rows: int = 0


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None


class Config(BaseModel):
    """Root configuration object."""
    instructions: InstructionsConfig = Field(default_factory=InstructionsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


ENV_REF = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}")


def _expand_env_refs(value: str) -> str:
    """Replace every ${VAR} or ${VAR:-default} inside a string.

    Unset variables without a default are left as written.
    """
    def replace(match: re.Match) -> str:
        default = match.group("default")
        fallback = match.group(0) if default is None else default
        return os.environ.get(match.group("name"), fallback)

    return ENV_REF.sub(replace, value)


def _resolve_env_vars(data: Any) -> Any:
    """Expand environment references in every string of a YAML tree."""
    if isinstance(data, str):
        return _expand_env_refs(data)
    if isinstance(data, dict):
        return {key: _resolve_env_vars(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_resolve_env_vars(item) for item in data]
    return data


CONFIG_ENV_VAR = "FOLLOWBACK_CONFIG"
PROJECT_ROOT = Path(__file__).parent.parent.parent


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge ``override`` into a copy of ``base``; nested sections merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _deep_merge(current, value)
        merged[key] = value
    return merged


def load_config(
    config_path: Optional[Path] = None,
    local_config_path: Optional[Path] = None,
) -> Config:
    """Load configuration from YAML files.

    The main file is ``config_path``, else ``$FOLLOWBACK_CONFIG``, else
    ``config.yaml`` in the project root. Local overrides default to
    ``config.local.yaml`` next to the main file. Missing files are skipped.

    Returns:
        Merged and validated Config object
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        config_path = Path(env_path) if env_path else PROJECT_ROOT / "config.yaml"
    if local_config_path is None:
        local_config_path = config_path.with_name("config.local.yaml")

    config_data = _deep_merge(_read_yaml(config_path), _read_yaml(local_config_path))

    return Config(**_resolve_env_vars(config_data))
