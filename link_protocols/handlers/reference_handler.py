"""Dictionary and DOI link handlers."""

from urllib.parse import quote

from link_protocols.services.detection.base_handler import BaseProtocolHandler


class _LookupHandler(BaseProtocolHandler):
    """Resolves ``scheme:TERM`` to a lookup URL and opens it on browse."""

    def _base_url(self) -> str:
        raise NotImplementedError

    def _quote(self, term: str) -> str:
        return quote(term)

    def resolve(self, url: str) -> str | None:
        term = self._strip_scheme(url).strip()
        if not term:
            return None
        return self._base_url() + self._quote(term)

    def browse(self, url: str, other_window: bool = False) -> None:
        target = self.resolve(url)
        if target:
            self.host.open_url(target, other_window)


class DictHandler(_LookupHandler):
    """``dict:WORD`` looks the word up in an online dictionary."""

    @classmethod
    def get_patterns(cls) -> list[str]:
        return ["dict:"]

    def _base_url(self) -> str:
        return self.config.protocols.reference.dict_url


class DoiHandler(_LookupHandler):
    """``doi:10.1000/182`` points at the DOI resolver."""

    @classmethod
    def get_patterns(cls) -> list[str]:
        return ["doi:"]

    def _base_url(self) -> str:
        return self.config.protocols.reference.doi_url

    def _quote(self, term: str) -> str:
        return quote(term, safe="/")
