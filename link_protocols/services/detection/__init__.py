"""Protocol detection: the registry and the handler base class."""

from .base_handler import BaseProtocolHandler
from .registry import ProtocolRegistry, build_matcher

__all__ = ["BaseProtocolHandler", "ProtocolRegistry", "build_matcher"]
