"""Protocol descriptor and match result models."""

from dataclasses import dataclass

from link_protocols.core.interfaces import BrowseHandler, ResolveHandler


@dataclass(frozen=True)
class ProtocolDescriptor:
    """One registry entry: a scheme pattern and its two handlers.

    A missing ``browse_handler`` makes activation a no-op. A missing
    ``resolve_handler`` means links of this scheme are omitted from
    published output.
    """

    pattern: str
    browse_handler: BrowseHandler | None = None
    resolve_handler: ResolveHandler | None = None

    def __post_init__(self):
        if not isinstance(self.pattern, str) or not self.pattern:
            raise ValueError("Protocol pattern must be a non-empty string")

    @property
    def publishes(self) -> bool:
        return self.resolve_handler is not None

    def describe(self) -> dict[str, str | None]:
        return {
            "pattern": self.pattern,
            "browse": _handler_name(self.browse_handler),
            "resolve": _handler_name(self.resolve_handler),
        }


@dataclass(frozen=True)
class ProtocolMatch:
    """Result of scheme detection on a link string."""

    url: str
    scheme: str
    descriptor: ProtocolDescriptor | None = None


def _handler_name(handler) -> str | None:
    if handler is None:
        return None
    owner = getattr(handler, "__self__", None)
    name = getattr(handler, "__name__", type(handler).__name__)
    if owner is not None:
        return f"{type(owner).__name__}.{name}"
    return name
