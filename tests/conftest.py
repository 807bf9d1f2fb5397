"""Pytest configuration: isolated config and a recording host environment."""

import os

import pytest

from link_protocols.core.config import AppConfig, reset_config
from link_protocols.services.detection.registry import ProtocolRegistry


class RecordingHost:
    """Host environment double that records navigation requests."""

    def __init__(self):
        self.calls = []

    def open_url(self, url: str, other_window: bool = False) -> bool:
        self.calls.append(("url", url, other_window))
        return True

    def open_info(self, manual: str, node: str = "Top", other_window: bool = False) -> bool:
        self.calls.append(("info", manual, node, other_window))
        return True

    def open_man_page(self, name: str, section=None, other_window: bool = False) -> bool:
        self.calls.append(("man", name, section, other_window))
        return True


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep config files and LINKPROTO_* variables on this machine out of tests."""
    monkeypatch.setattr(AppConfig, "_config_files", classmethod(lambda cls: []))
    for name in list(os.environ):
        if name.upper().startswith("LINKPROTO_"):
            monkeypatch.delenv(name)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config():
    return AppConfig()


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def registry():
    """A fresh, empty registry."""
    return ProtocolRegistry()


@pytest.fixture
def default_registry(host, config):
    """The built-in protocol table wired to a recording host."""
    return ProtocolRegistry.with_defaults(host=host, config=config)
