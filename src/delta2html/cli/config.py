#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the delta2html CLI.

Config files hold option values for grouping and HTML rendering, either flat
or under ``grouping`` and ``html`` tables::

    # .delta2html.toml
    inline_styles = true

    [grouping]
    multi_line_code_block = false
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from delta2html.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from delta2html.exceptions import ConfigError

logger = logging.getLogger(__name__)

PYPROJECT_FILENAME = "pyproject.toml"


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.delta2html]`` table of a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict when the file has none

    Raises
    ------
    ConfigError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Invalid TOML in {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    In each directory the dedicated files (``.delta2html.toml``,
    ``.delta2html.yaml``, ``.delta2html.yml``, ``.delta2html.json``) are
    checked first, then a ``pyproject.toml`` holding a ``[tool.delta2html]``
    table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a config file in the parent directories, then the home directory."""
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Invalid TOML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def load_config_file(config_path: Union[Path, str]) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    The format is chosen by file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, unparsable or of an unsupported format

    Examples
    --------
    >>> config = load_config_file(".delta2html.toml")
    >>> config.get("inline_styles")
    True

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == PYPROJECT_FILENAME:
            return _load_pyproject_section(config_path)
        if ext == ".toml":
            return _load_toml_config(config_path)
        if ext in (".yaml", ".yml"):
            return _load_yaml_config(config_path)
        if ext == ".json":
            return _load_json_config(config_path)
    except OSError as e:
        raise ConfigError(
            f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    raise ConfigError(
        f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
    )


def merge_configs(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep-merge two config mappings; values from ``override`` win.

    Examples
    --------
    >>> merge_configs({"html": {"a": 1, "b": 2}}, {"html": {"b": 3}})
    {'html': {'a': 1, 'b': 3}}

    """
    result: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


__all__ = [
    "discover_config_file",
    "find_config_in_parents",
    "load_config_file",
    "merge_configs",
]
