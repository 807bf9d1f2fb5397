"""Core primitives: configuration, enums and interfaces."""

from .config import AppConfig, get_config, load_config, reset_config, set_config

__all__ = [
    "AppConfig",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
]
