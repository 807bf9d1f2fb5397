"""Ordered protocol registry with a combined scheme matcher."""

import re
from collections.abc import Iterable, Iterator
from typing import Any

from link_protocols.core.interfaces import BrowseHandler, ResolveHandler
from link_protocols.models.descriptor import ProtocolDescriptor, ProtocolMatch
from link_protocols.utils.common import as_plain_text
from link_protocols.utils.error_helpers import extract_error_context, format_error_context
from link_protocols.utils.logger import get_logger

logger = get_logger(__name__)

# Characters allowed inside a URL token, and the subset allowed as its last
# character (trailing punctuation and closing parentheses belong to the
# surrounding prose).
URL_BODY = r"[^\]\[\s\"'<>^`{}]*"
URL_TAIL = r"[^\]\[\s\"'()<>^`{}.,;]+"


def build_matcher(patterns: Iterable[str]) -> re.Pattern | None:
    """Compile the combined matcher for ``patterns`` (None when empty)."""
    patterns = list(patterns)
    if not patterns:
        return None
    alternation = "|".join(patterns)
    return re.compile(rf"(?<!\w)(?P<scheme>{alternation}){URL_BODY}{URL_TAIL}")


class ProtocolRegistry:
    """Registry mapping link schemes to browse and resolve handlers.

    Descriptors are kept in insertion order. Lookups scan that order and the
    first matching pattern wins, so a descriptor added later never shadows
    an earlier one with an overlapping pattern.
    """

    def __init__(self, descriptors: Iterable[ProtocolDescriptor] = ()):
        self._descriptors: list[ProtocolDescriptor] = []
        self._matcher: re.Pattern | None = None
        for descriptor in descriptors:
            self.add_descriptor(descriptor)

    @classmethod
    def with_defaults(cls, host=None, config=None) -> "ProtocolRegistry":
        """Create a registry holding the built-in table and configured extras.

        Args:
            host: Host environment for the built-in handlers; SystemHost if None
            config: Configuration; the process default if None

        Returns:
            A new registry
        """
        from link_protocols.handlers import build_default_descriptors

        registry = cls(build_default_descriptors(host=host, config=config))
        logger.debug(f"[REGISTRY] Default registry built with {len(registry)} protocols")
        return registry

    def add(
        self,
        pattern: str,
        browse_handler: BrowseHandler | None = None,
        resolve_handler: ResolveHandler | None = None,
    ) -> ProtocolDescriptor:
        """Register a protocol.

        Args:
            pattern: Regex fragment matching the scheme prefix
            browse_handler: Called as ``handler(url, other_window)`` on activation
            resolve_handler: Called as ``handler(url)`` at publish time; None omits
                links of this scheme from published output

        Returns:
            The descriptor held by the registry

        Raises:
            ValueError: If the pattern is empty
            re.error: If the pattern does not compile
        """
        return self.add_descriptor(ProtocolDescriptor(pattern, browse_handler, resolve_handler))

    def add_descriptor(self, descriptor: ProtocolDescriptor) -> ProtocolDescriptor:
        """Register a prebuilt descriptor; exact duplicates are ignored."""
        if descriptor in self._descriptors:
            logger.debug(f"[REGISTRY] Protocol {descriptor.pattern!r} already registered")
            candidates = self._descriptors
        else:
            candidates = [*self._descriptors, descriptor]

        try:
            matcher = build_matcher(d.pattern for d in candidates)
        except re.error as e:
            context = extract_error_context(e, operation="add", pattern=descriptor.pattern)
            logger.error(f"[REGISTRY] Invalid protocol pattern: {format_error_context(context)}")
            raise

        self._descriptors = candidates
        self._matcher = matcher
        logger.debug(
            f"[REGISTRY] Registered {descriptor.pattern!r}; {len(self._descriptors)} protocols"
        )
        return descriptor

    def find_descriptor(self, candidate: str) -> ProtocolDescriptor | None:
        """Return the first descriptor whose pattern matches the start of ``candidate``."""
        for descriptor in self._descriptors:
            if re.match(descriptor.pattern, candidate):
                return descriptor
        return None

    def detect(self, url: Any) -> ProtocolMatch | None:
        """Find the scheme token in ``url`` and the descriptor handling it.

        Returns:
            ProtocolMatch, or None when the text holds no recognizable link
        """
        text = as_plain_text(url)
        if text is None or self._matcher is None:
            return None

        match = self._matcher.search(text)
        if match is None:
            return None

        scheme = match.group("scheme")
        return ProtocolMatch(url=text, scheme=scheme, descriptor=self.find_descriptor(scheme))

    def browse(self, url: Any, other_window: bool = False) -> None:
        """Perform the navigation action registered for ``url``'s scheme.

        Unrecognized input is ignored.
        """
        detected = self.detect(url)
        if detected is None or detected.descriptor is None:
            logger.debug(f"[REGISTRY] No protocol to browse {url!r}")
            return

        handler = detected.descriptor.browse_handler
        if handler is None:
            logger.debug(f"[REGISTRY] Protocol {detected.descriptor.pattern!r} has no browse action")
            return

        logger.debug(f"[REGISTRY] Browsing {detected.url!r} via {detected.descriptor.pattern!r}")
        handler(detected.url, other_window)

    def resolve(self, url: Any) -> str | None:
        """Return the publish-time form of ``url``.

        Links with no recognizable scheme come back unchanged; links whose
        protocol has no resolver come back as None, meaning "do not publish
        as a link".
        """
        detected = self.detect(url)
        if detected is None or detected.descriptor is None:
            return url

        handler = detected.descriptor.resolve_handler
        if handler is None:
            logger.debug(f"[REGISTRY] Omitting {detected.url!r} from published output")
            return None

        return handler(detected.url)

    @property
    def descriptors(self) -> tuple[ProtocolDescriptor, ...]:
        return tuple(self._descriptors)

    @property
    def patterns(self) -> list[str]:
        return [d.pattern for d in self._descriptors]

    @property
    def matcher(self) -> re.Pattern | None:
        return self._matcher

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[ProtocolDescriptor]:
        return iter(tuple(self._descriptors))

    def __contains__(self, descriptor: object) -> bool:
        return descriptor in self._descriptors
