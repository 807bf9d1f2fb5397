"""Pluggable link protocols: browse and publish-time resolution of URL-like links."""

from .core.config import AppConfig, get_config, load_config, reset_config, set_config
from .models.descriptor import ProtocolDescriptor, ProtocolMatch
from .services.detection.base_handler import BaseProtocolHandler
from .services.detection.registry import ProtocolRegistry
from .services.host.system_host import SystemHost

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "BaseProtocolHandler",
    "ProtocolDescriptor",
    "ProtocolMatch",
    "ProtocolRegistry",
    "SystemHost",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
]
