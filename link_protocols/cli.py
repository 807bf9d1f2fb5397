"""
Command line host for the protocol registry.

Usage:
    link-protocols resolve google://python "info://emacs#Top"
    link-protocols browse man://ls:1
    link-protocols list
    link-protocols --config config.yaml resolve doi:10.1000/182
"""

from __future__ import annotations

import argparse
import logging
import sys
from link_protocols.core.config import get_config, load_config
from link_protocols.services.detection.registry import ProtocolRegistry
from link_protocols.services.host.system_host import SystemHost
from link_protocols.utils.logger import get_logger, set_log_level

logger = get_logger(__name__)

OMITTED = "<omit>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="link-protocols", description="Browse or resolve URL-like links"
    )
    parser.add_argument("--config", help="YAML or JSON configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    resolve = commands.add_parser("resolve", help="Print the published form of each link")
    resolve.add_argument("urls", nargs="+")

    browse = commands.add_parser("browse", help="Open a link")
    browse.add_argument("url")
    browse.add_argument("--other-window", action="store_true", help="Prefer a new window")

    commands.add_parser("list", help="List registered protocol patterns in dispatch order")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_log_level(logging.DEBUG)

    config = load_config(args.config) if args.config else get_config()
    registry = ProtocolRegistry.with_defaults(host=SystemHost(config), config=config)

    if args.command == "resolve":
        for url in args.urls:
            resolved = registry.resolve(url)
            print(OMITTED if resolved is None else resolved)
    elif args.command == "browse":
        if registry.detect(args.url) is None:
            logger.warning(f"[CLI] No protocol recognized in {args.url!r}")
            return 1
        registry.browse(args.url, other_window=args.other_window)
    else:
        for descriptor in registry:
            info = descriptor.describe()
            print(f"{info['pattern']}\tbrowse={info['browse']}\tresolve={info['resolve']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
