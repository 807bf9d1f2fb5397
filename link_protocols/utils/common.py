from typing import Any


def as_plain_text(value: Any) -> str | None:
    """Return ``value`` as a plain ``str``, dropping any styling it carries.

    Hosts often hand over rich-text objects (``str`` subclasses or objects
    with a ``plain`` attribute, such as ``rich.text.Text``). Only the
    characters matter for dispatch.
    """
    if value is None:
        return None
    plain = getattr(value, "plain", None)
    if isinstance(plain, str):
        return str(plain)
    return str.__str__(value) if isinstance(value, str) else str(value)
