"""Base handler class for protocol handlers with shared dependencies."""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator

from link_protocols.core.config import AppConfig, get_config
from link_protocols.core.interfaces import IHostEnvironment
from link_protocols.models.descriptor import ProtocolDescriptor


class BaseProtocolHandler(ABC):
    """Base class for protocol handlers with shared dependencies.

    Provides:
    - host: IHostEnvironment used for navigation
    - config: AppConfig instance
    - descriptors() pairing each pattern from get_patterns() with the
      handler's browse and resolve capabilities

    Handlers that cannot be published as a flat URL set ``resolves = False``;
    their links are then omitted from published output.
    """

    resolves: bool = True

    def __init__(self, host: IHostEnvironment, config: AppConfig | None = None):
        """Initialize base handler with shared dependencies.

        Args:
            host: Host environment providing navigation primitives
            config: Configuration; the process default if None
        """
        self.host = host
        self.config = config if config is not None else get_config()

    @classmethod
    @abstractmethod
    def get_patterns(cls) -> list[str]:
        """Get scheme patterns for this handler.

        Returns:
            List of regex fragments matching scheme prefixes
        """
        ...

    @abstractmethod
    def browse(self, url: str, other_window: bool = False) -> None:
        """Navigate to the link target."""
        ...

    def resolve(self, url: str) -> str | None:
        """Return the publish-time form of the link. Identity by default."""
        return url

    def descriptors(self) -> Iterator[ProtocolDescriptor]:
        resolver = self.resolve if self.resolves else None
        for pattern in self.get_patterns():
            yield ProtocolDescriptor(pattern, self.browse, resolver)

    def _strip_scheme(self, url: str) -> str:
        """Return ``url`` without the leading scheme prefix this handler matched."""
        for pattern in self.get_patterns():
            match = re.match(pattern, url)
            if match:
                return url[match.end():]
        return url
