"""Built-in protocol handlers."""

from .defaults import DEFAULT_HANDLERS, build_default_descriptors
from .info_handler import InfoHandler, parse_info_url
from .man_handler import ManHandler, parse_man_url
from .reference_handler import DictHandler, DoiHandler
from .search_handler import SearchHandler
from .url_handler import GenericUrlHandler, UrlPrefixHandler

__all__ = [
    "DEFAULT_HANDLERS",
    "DictHandler",
    "DoiHandler",
    "GenericUrlHandler",
    "InfoHandler",
    "ManHandler",
    "SearchHandler",
    "UrlPrefixHandler",
    "build_default_descriptors",
    "parse_info_url",
    "parse_man_url",
]
