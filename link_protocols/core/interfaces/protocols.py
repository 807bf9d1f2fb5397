"""Protocol definitions for structural typing."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class BrowseHandler(Protocol):
    """Navigate capability: act on an activated link."""

    def __call__(self, url: str, other_window: bool = False) -> None: ...


@runtime_checkable
class ResolveHandler(Protocol):
    """Transform-or-omit capability: publish-time form of a link, or None."""

    def __call__(self, url: str) -> str | None: ...
