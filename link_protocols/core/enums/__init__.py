"""Core enums."""

from .protocol_action import BrowseAction, ResolveAction

__all__ = ["BrowseAction", "ResolveAction"]
