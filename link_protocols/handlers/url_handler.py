"""Generic network scheme handlers delegating to the host's URL opener."""

from link_protocols.services.detection.base_handler import BaseProtocolHandler


class GenericUrlHandler(BaseProtocolHandler):
    """Common network schemes: opened by the host, published unchanged."""

    @classmethod
    def get_patterns(cls) -> list[str]:
        return [
            "http:/?/?",
            "https:/?/?",
            "ftp:/?/?",
            "gopher://",
            "telnet://",
            "wais://",
            "file://?",
            "news:",
            "snews:",
            "mailto:",
        ]

    def browse(self, url: str, other_window: bool = False) -> None:
        self.host.open_url(url, other_window)


class UrlPrefixHandler(BaseProtocolHandler):
    """``URL:http://...`` wrappers: the prefix is dropped before use."""

    @classmethod
    def get_patterns(cls) -> list[str]:
        return ["[uU][rR][lL]:"]

    def resolve(self, url: str) -> str | None:
        return self._strip_scheme(url).strip() or None

    def browse(self, url: str, other_window: bool = False) -> None:
        target = self.resolve(url)
        if target:
            self.host.open_url(target, other_window)
