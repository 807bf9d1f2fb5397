"""Tests for the built-in protocol handlers and the default table."""

import pytest

from link_protocols import AppConfig, ProtocolRegistry
from link_protocols.handlers import (
    GenericUrlHandler,
    InfoHandler,
    ManHandler,
    SearchHandler,
    parse_info_url,
    parse_man_url,
)


class TestDefaultTable:
    """Test the order and contents of the default protocol table."""

    def test_dispatch_order(self, default_registry):
        """Built-in protocols appear in their documented order."""
        assert default_registry.patterns == [
            "[uU][rR][lL]:",
            "info://",
            "man://",
            "google://",
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
            "dict:",
            "doi:",
        ]

    def test_https_is_not_taken_by_http(self, default_registry):
        """The http pattern does not claim https links."""
        assert default_registry.find_descriptor("https://").pattern == "https:/?/?"
        assert default_registry.find_descriptor("http://").pattern == "http:/?/?"

    def test_navigation_only_schemes_have_no_resolver(self, default_registry):
        """info and man links are never published."""
        assert default_registry.find_descriptor("info://").publishes is False
        assert default_registry.find_descriptor("man://").publishes is False
        assert default_registry.find_descriptor("google://").publishes is True

    def test_configured_extras_follow_defaults(self, host):
        """Protocols declared in config are appended after the built-ins."""
        config = AppConfig(
            protocols={
                "extra": [
                    {"pattern": "gemini://"},
                    {"pattern": "secret:", "browse": "none", "resolve": "omit"},
                ]
            }
        )
        registry = ProtocolRegistry.with_defaults(host=host, config=config)

        assert registry.patterns[-2:] == ["gemini://", "secret:"]
        assert registry.resolve("gemini://capsule/") == "gemini://capsule/"
        assert registry.resolve("secret:plans") is None

        registry.browse("gemini://capsule/")
        registry.browse("secret:plans")
        assert host.calls == [("url", "gemini://capsule/", False)]

    def test_building_twice_gives_independent_registries(self, host, config):
        """Registries do not share state."""
        first = ProtocolRegistry.with_defaults(host=host, config=config)
        second = ProtocolRegistry.with_defaults(host=host, config=config)
        first.add("gemini://")

        assert "gemini://" in first.patterns
        assert "gemini://" not in second.patterns


class TestResolveDefaults:
    """Test publish-time resolution with the default table."""

    def test_info_link_is_omitted(self, default_registry):
        assert default_registry.resolve("info://Emacs#Top") is None

    def test_man_link_is_omitted(self, default_registry):
        assert default_registry.resolve("man://ls:1") is None

    def test_google_query(self, default_registry):
        """Search links become web search URLs with the query encoded."""
        assert (
            default_registry.resolve("google://test query")
            == "http://www.google.com/search?q=test+query"
        )

    def test_google_query_unquoted(self, host):
        """Query encoding can be switched off and the search URL replaced."""
        config = AppConfig(
            protocols={"search": {"url": "https://duckduckgo.com/?q=", "quote_query": False}}
        )
        registry = ProtocolRegistry.with_defaults(host=host, config=config)
        assert registry.resolve("google://test query") == "https://duckduckgo.com/?q=test query"

    @pytest.mark.parametrize(
        "url",
        [
            "http://example.org/index.html",
            "https://example.org/a?b=c",
            "ftp://ftp.example.org/pub/",
            "file:///etc/hosts",
            "mailto:someone@example.org",
            "news:comp.lang.python",
        ],
    )
    def test_network_links_published_unchanged(self, default_registry, url):
        assert default_registry.resolve(url) == url

    def test_unknown_scheme_unchanged(self, default_registry):
        assert default_registry.resolve("unknown-scheme://x") == "unknown-scheme://x"

    def test_url_prefix_is_stripped(self, default_registry):
        assert default_registry.resolve("URL:http://example.org") == "http://example.org"
        assert default_registry.resolve("url:https://example.org") == "https://example.org"

    def test_dict_lookup(self, default_registry):
        assert default_registry.resolve("dict:serendipity") == (
            "http://www.dict.org/bin/Dict?Form=Dict1&Database=*&Strategy=*&Query=serendipity"
        )

    def test_doi_lookup(self, default_registry):
        assert default_registry.resolve("doi:10.1000/182") == "http://dx.doi.org/10.1000/182"


class TestBrowseDefaults:
    """Test navigation with the default table."""

    def test_info_with_node(self, default_registry, host):
        default_registry.browse("info://emacs#Buffers")
        assert host.calls == [("info", "emacs", "Buffers", False)]

    def test_info_defaults_to_top(self, default_registry, host):
        default_registry.browse("info://emacs")
        assert host.calls == [("info", "emacs", "Top", False)]

    def test_info_parenthesized_target(self, default_registry, host):
        default_registry.browse("info://(emacs)Dired", other_window=True)
        assert host.calls == [("info", "emacs", "Dired", True)]

    def test_man_with_section(self, default_registry, host):
        default_registry.browse("man://printf:3")
        assert host.calls == [("man", "printf", "3", False)]

    def test_man_without_section(self, default_registry, host):
        default_registry.browse("man://ls")
        assert host.calls == [("man", "ls", None, False)]

    def test_google_opens_search(self, default_registry, host):
        default_registry.browse("google://python regex")
        assert host.calls == [("url", "http://www.google.com/search?q=python+regex", False)]

    def test_web_link_opens_url(self, default_registry, host):
        default_registry.browse("https://example.org/", other_window=True)
        assert host.calls == [("url", "https://example.org/", True)]

    def test_url_prefix_opens_wrapped_url(self, default_registry, host):
        default_registry.browse("URL:http://example.org")
        assert host.calls == [("url", "http://example.org", False)]

    def test_plain_text_does_nothing(self, default_registry, host):
        default_registry.browse("no links in here")
        default_registry.browse("unknown-scheme://x")
        assert host.calls == []


class TestParsers:
    """Test the info and man link parsers."""

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("info://emacs", ("emacs", "Top")),
            ("info://emacs#Top", ("emacs", "Top")),
            ("info://elisp#Hash Tables", ("elisp", "Hash Tables")),
            ("info://(emacs)Dired", ("emacs", "Dired")),
            ("info://(emacs)", ("emacs", "Top")),
        ],
    )
    def test_parse_info_url(self, url, expected):
        assert parse_info_url(url) == expected

    def test_parse_info_url_rejects_other_schemes(self):
        assert parse_info_url("man://ls") is None
        assert parse_info_url("info://") is None

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("man://ls", ("ls", None)),
            ("man://ls:1", ("ls", "1")),
            ("man://printf(3)", ("printf", "3")),
        ],
    )
    def test_parse_man_url(self, url, expected):
        assert parse_man_url(url) == expected

    def test_parse_man_url_rejects_garbage(self):
        assert parse_man_url("man://") is None
        assert parse_man_url("info://emacs") is None


class TestHandlers:
    """Test handler objects directly."""

    def test_descriptors_per_pattern(self, host, config):
        handler = GenericUrlHandler(host, config)
        descriptors = list(handler.descriptors())

        assert [d.pattern for d in descriptors] == GenericUrlHandler.get_patterns()
        assert all(d.browse_handler == handler.browse for d in descriptors)
        assert all(d.resolve_handler == handler.resolve for d in descriptors)

    def test_navigation_only_handlers_have_no_resolver(self, host, config):
        for handler_class in (InfoHandler, ManHandler):
            (descriptor,) = handler_class(host, config).descriptors()
            assert descriptor.resolve_handler is None

    def test_search_handler_uses_process_config_by_default(self, host):
        handler = SearchHandler(host)
        assert handler.resolve("google:python") == "http://www.google.com/search?q=python"

    def test_invalid_info_link_ignored(self, host, config):
        InfoHandler(host, config).browse("info://")
        assert host.calls == []
