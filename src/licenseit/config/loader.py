"""Configuration file loading."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import yaml

from licenseit.config.schema import EMPTY_CONFIG, LicenseitConfig
from licenseit.errors import ConfigReadError

logger = logging.getLogger(__name__)

APP_DIRNAME = "licenseit"
CONFIG_FILENAME = "config.json"


def get_config_home() -> Path:
    """Get the base config directory: $XDG_CONFIG_HOME or ~/.config."""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home)
    return Path.home() / ".config"


def get_default_config_path() -> Path:
    """Get path to the default config: <config home>/licenseit/config.json."""
    return get_config_home() / APP_DIRNAME / CONFIG_FILENAME


def load_config_file(path: Path) -> LicenseitConfig:
    """Load a config file.

    JSON is tried first; anything that is not valid JSON is parsed as YAML.
    An empty file yields an empty config.

    Raises:
        ConfigReadError: If the file cannot be read, is malformed, or does not
            hold a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, str(e)) from e

    try:
        data = json.loads(text) if text.strip() else None
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigReadError(path, f"could not parse: {e}") from e

    if data is None:
        return EMPTY_CONFIG
    if not isinstance(data, dict):
        raise ConfigReadError(path, "expected a mapping at the top level")

    return LicenseitConfig.from_dict(data)


def load_config(
    path: Path | None = None,
) -> tuple[LicenseitConfig, ConfigReadError | None]:
    """Load the configuration for one run.

    Exactly one location is consulted:
    - `path` if given: read errors are returned alongside an empty config so
      the caller can warn about them.
    - otherwise the default path: missing or broken files are ignored.

    Returns (config, error).
    """
    if path is not None:
        try:
            return load_config_file(path), None
        except ConfigReadError as e:
            logger.debug("Config read failed: %s", e)
            return EMPTY_CONFIG, e

    try:
        default_path = get_default_config_path()
    except RuntimeError as e:
        # Path.home() fails when no home directory can be determined
        logger.debug("No default config location: %s", e)
        return EMPTY_CONFIG, None
    if not default_path.is_file():
        logger.debug("No config at %s", default_path)
        return EMPTY_CONFIG, None
    try:
        return load_config_file(default_path), None
    except ConfigReadError as e:
        logger.debug("Ignoring default config: %s", e)
        return EMPTY_CONFIG, None
