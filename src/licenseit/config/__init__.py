"""Configuration loading."""

from licenseit.config.loader import (
    get_config_home,
    get_default_config_path,
    load_config,
    load_config_file,
)
from licenseit.config.schema import EMPTY_CONFIG, LicenseitConfig

__all__ = [
    "EMPTY_CONFIG",
    "LicenseitConfig",
    "get_config_home",
    "get_default_config_path",
    "load_config",
    "load_config_file",
]
