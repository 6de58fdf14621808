"""
Configuration loading.

Each environment has its own TOML file under ``carbon_tracker/cfg``.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import toml

from carbon_tracker.utils.constants import ConfigFile

CONFIG_DIR = Path(__file__).resolve().parent.parent / "cfg"

__all__ = ["CONFIG_DIR", "Config", "ConfigFile", "get_config"]


class Config:
    """Parsed configuration file."""

    def __init__(self, config_file: str, data: dict[str, Any]):
        self.config_file = config_file
        self.data = data

    def section(self, name: str) -> dict[str, Any]:
        """Return a config section, or an empty dict if it is absent."""
        return self.data.get(name, {})

    def __repr__(self):
        return f"<Config: {self.config_file}>"


@lru_cache
def get_config(config_file: str = ConfigFile.DEVELOPMENT) -> Config:
    """
    Load a configuration file from the config directory.

    Args:
        config_file: File name, e.g. "development.toml"

    Returns:
        Config instance

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = CONFIG_DIR / config_file
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    logging.debug(f"Loading config from {path}")
    return Config(config_file, toml.load(path))
