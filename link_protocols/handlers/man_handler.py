"""Manual page link handler implementation."""

import re

from link_protocols.services.detection.base_handler import BaseProtocolHandler
from link_protocols.utils.logger import get_logger

logger = get_logger(__name__)

# man://ls, man://ls:1 or man://ls(1)
MAN_URL = re.compile(r"\Aman://([^:(\s]+)(?::(\w+)|\((\w+)\))?\s*\Z")


def parse_man_url(url: str) -> tuple[str, str | None] | None:
    """Split a manual page link into ``(name, section)``."""
    match = MAN_URL.match(url)
    if match is None:
        return None
    return match.group(1), match.group(2) or match.group(3)


class ManHandler(BaseProtocolHandler):
    """Opens a system manual page. Never published as a link."""

    resolves = False

    @classmethod
    def get_patterns(cls) -> list[str]:
        return ["man://"]

    def browse(self, url: str, other_window: bool = False) -> None:
        page = parse_man_url(url)
        if page is None:
            logger.debug(f"[MAN_HANDLER] Not a manual page link: {url!r}")
            return
        name, section = page
        self.host.open_man_page(name, section, other_window)
