from enum import StrEnum


class BrowseAction(StrEnum):
    OPEN_URL = "open_url"
    NONE = "none"


class ResolveAction(StrEnum):
    IDENTITY = "identity"
    OMIT = "omit"
