from typing import Protocol, runtime_checkable


@runtime_checkable
class IHostEnvironment(Protocol):
    """Navigation primitives the host application provides to link handlers."""

    def open_url(self, url: str, other_window: bool = False) -> bool:
        ...

    def open_info(self, manual: str, node: str = "Top", other_window: bool = False) -> bool:
        ...

    def open_man_page(
        self, name: str, section: str | None = None, other_window: bool = False
    ) -> bool:
        ...
