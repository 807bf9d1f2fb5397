"""The default protocol table."""

from link_protocols.core.config import AppConfig, get_config
from link_protocols.core.enums import BrowseAction, ResolveAction
from link_protocols.core.interfaces import IHostEnvironment
from link_protocols.models.descriptor import ProtocolDescriptor
from link_protocols.utils.logger import get_logger

from .info_handler import InfoHandler
from .man_handler import ManHandler
from .reference_handler import DictHandler, DoiHandler
from .search_handler import SearchHandler
from .url_handler import GenericUrlHandler, UrlPrefixHandler

logger = get_logger(__name__)

DEFAULT_HANDLERS = (
    UrlPrefixHandler,
    InfoHandler,
    ManHandler,
    SearchHandler,
    GenericUrlHandler,
    DictHandler,
    DoiHandler,
)


def build_default_descriptors(
    host: IHostEnvironment | None = None, config: AppConfig | None = None
) -> list[ProtocolDescriptor]:
    """Build the built-in descriptors followed by those declared in config.

    Args:
        host: Host environment the handlers navigate with; SystemHost if None
        config: Configuration; the process default if None

    Returns:
        Descriptors in dispatch order
    """
    config = config if config is not None else get_config()
    if host is None:
        from link_protocols.services.host import SystemHost

        host = SystemHost(config)

    descriptors: list[ProtocolDescriptor] = []
    generic = None
    for handler_class in DEFAULT_HANDLERS:
        handler = handler_class(host, config)
        if isinstance(handler, GenericUrlHandler):
            generic = handler
        descriptors.extend(handler.descriptors())

    for extra in config.protocols.extra:
        browse = generic.browse if extra.browse == BrowseAction.OPEN_URL else None
        resolve = generic.resolve if extra.resolve == ResolveAction.IDENTITY else None
        descriptors.append(ProtocolDescriptor(extra.pattern, browse, resolve))
        logger.debug(f"[DEFAULTS] Configured protocol {extra.pattern!r}")

    return descriptors
