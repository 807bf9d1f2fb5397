"""Interfaces shared between the registry, handlers and hosts."""

from .host import IHostEnvironment
from .protocols import BrowseHandler, ResolveHandler

__all__ = [
    "BrowseHandler",
    "IHostEnvironment",
    "ResolveHandler",
]
