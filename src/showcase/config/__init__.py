"""Configuration module for showcase."""

from .settings import Settings, load_settings, get_settings, reset_settings
from .loader import ConfigPaths, init_local_config, get_config_paths

__all__ = [
    "Settings",
    "load_settings",
    "get_settings",
    "reset_settings",
    "ConfigPaths",
    "init_local_config",
    "get_config_paths",
]
