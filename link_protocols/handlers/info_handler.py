"""Info manual link handler implementation."""

import re

from link_protocols.services.detection.base_handler import BaseProtocolHandler
from link_protocols.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_NODE = "Top"

# info://(emacs)Buffers
PARENTHESIZED_TARGET = re.compile(r"\Ainfo://\(([^)\n]+)\)(.*)\Z")
# info://emacs#Buffers or info://emacs
FRAGMENT_TARGET = re.compile(r"\Ainfo://([^#\n]+)#?(.*)\Z")


def parse_info_url(url: str) -> tuple[str, str] | None:
    """Split an info link into ``(manual, node)``.

    The node defaults to ``Top`` when the link names only the manual.
    """
    match = PARENTHESIZED_TARGET.match(url) or FRAGMENT_TARGET.match(url)
    if match is None:
        return None
    manual, node = match.group(1).strip(), match.group(2).strip()
    if not manual:
        return None
    return manual, node or DEFAULT_NODE


class InfoHandler(BaseProtocolHandler):
    """Navigates to a node of an Info manual. Never published as a link."""

    resolves = False

    @classmethod
    def get_patterns(cls) -> list[str]:
        return ["info://"]

    def browse(self, url: str, other_window: bool = False) -> None:
        target = parse_info_url(url)
        if target is None:
            logger.debug(f"[INFO_HANDLER] Not an info link: {url!r}")
            return
        manual, node = target
        self.host.open_info(manual, node, other_window)
