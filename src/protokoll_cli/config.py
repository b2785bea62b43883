# -*- coding: utf-8 -*-
"""
Configuration management for the Protokoll CLI.

Loads configuration from, in increasing order of precedence:
  1. protokoll-config.yaml files (hierarchical, up the directory tree)
  2. Environment variables (PROTOKOLL_* prefix)
  3. Explicit overrides

When a config path is given, only that file is read.
"""

import os
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from . import DEFAULT_SERVER_COMMAND
from .exceptions import ConfigError

DEFAULT_CONFIG_FILE = "protokoll-config.yaml"
ENV_PREFIX = "PROTOKOLL_"

_TRUE_VALUES = ("true", "1", "yes", "on")


@dataclass
class ProtokollConfig:
    """
    Protokoll configuration.

    Attributes:
        mcp_server_command: Command that starts the MCP server
        mcp_server_args: Extra arguments for the server command
        input_directory: Default input directory for `batch`
        output_directory: Default output directory for processed transcripts
    """

    # MCP server settings
    mcp_server_command: str = DEFAULT_SERVER_COMMAND
    mcp_server_args: List[str] = field(default_factory=list)

    # Directory settings
    input_directory: Optional[str] = None
    output_directory: Optional[str] = None
    processed_directory: Optional[str] = None
    context_directories: Optional[List[str]] = None

    # Model settings
    model: Optional[str] = None
    transcription_model: Optional[str] = None
    classify_model: Optional[str] = None
    compose_model: Optional[str] = None

    # API settings
    openai_api_key: Optional[str] = None

    # Behavior settings
    debug: bool = False
    verbose: bool = False


_FIELDS = {f.name for f in fields(ProtokollConfig)}
_LIST_FIELDS = ("mcp_server_args", "context_directories")
_BOOL_FIELDS = ("debug", "verbose")


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def normalize_keys(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase / snake_case YAML keys onto config fields, dropping unknown keys."""
    normalized = {}
    for key, value in raw.items():
        name = _snake_case(str(key)).replace("-", "_")
        if name in _FIELDS:
            normalized[name] = value
    return normalized


def read_config_file(path: Path) -> Dict[str, Any]:
    """Read one YAML config file. Raises ConfigError if unreadable or malformed."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Failed to load config from {path}: expected a mapping")
    return normalize_keys(data)


def find_config_files(start: Optional[Path] = None) -> List[Path]:
    """protokoll-config.yaml files from the filesystem root down to `start`."""
    start = Path(start or os.getcwd()).resolve()
    found = []
    for directory in (start, *start.parents):
        candidate = directory / DEFAULT_CONFIG_FILE
        if candidate.is_file():
            found.append(candidate)
    found.reverse()
    return found


def env_overrides(environ=None) -> Dict[str, Any]:
    """Configuration values from PROTOKOLL_* environment variables."""
    environ = os.environ if environ is None else environ
    values = {}
    for name in _FIELDS:
        key = ENV_PREFIX + name.upper()
        if key not in environ:
            continue
        raw = environ[key]
        if name in _LIST_FIELDS:
            values[name] = raw.split()
        elif name in _BOOL_FIELDS:
            values[name] = raw.lower() in _TRUE_VALUES
        else:
            values[name] = raw
    return values


def load_config(overrides: Optional[Dict[str, Any]] = None, config_path: Optional[str] = None) -> ProtokollConfig:
    """
    Load configuration from files and environment.

    Args:
        overrides: Values that win over everything else
        config_path: Read only this file instead of searching the directory tree

    Returns:
        ProtokollConfig with defaults filled in

    Raises:
        ConfigError: If a config file cannot be read or parsed
    """
    values: Dict[str, Any] = {}

    if config_path:
        values.update(read_config_file(Path(config_path)))
    else:
        for path in find_config_files():
            values.update(read_config_file(path))

    values.update(env_overrides())
    values.update(normalize_keys(overrides or {}))

    for name in _LIST_FIELDS:
        if isinstance(values.get(name), str):
            values[name] = values[name].split()
    if values.get("mcp_server_args") is None:
        values.pop("mcp_server_args", None)
    if not values.get("mcp_server_command"):
        values.pop("mcp_server_command", None)

    return ProtokollConfig(**values)


def get_config_file_name() -> str:
    """Default config file name."""
    return DEFAULT_CONFIG_FILE
