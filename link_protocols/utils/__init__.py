"""Utilities shared by the registry, handlers and host environment."""

from .common import as_plain_text
from .logger import get_logger, set_log_level

__all__ = ["as_plain_text", "get_logger", "set_log_level"]
