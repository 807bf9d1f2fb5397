"""Web search link handler implementation."""

import re
from urllib.parse import quote_plus

from link_protocols.services.detection.base_handler import BaseProtocolHandler

SEARCH_URL = re.compile(r"\Agoogle:/?/?(.+)\Z", re.DOTALL)


class SearchHandler(BaseProtocolHandler):
    """Turns ``google://QUERY`` into a web search URL."""

    @classmethod
    def get_patterns(cls) -> list[str]:
        return ["google://"]

    def resolve(self, url: str) -> str | None:
        match = SEARCH_URL.match(url)
        if match is None:
            return None

        search = self.config.protocols.search
        query = match.group(1)
        if search.quote_query:
            query = quote_plus(query)
        return search.url + query

    def browse(self, url: str, other_window: bool = False) -> None:
        target = self.resolve(url)
        if target:
            self.host.open_url(target, other_window)
