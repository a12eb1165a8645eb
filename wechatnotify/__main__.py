"""CLI entry point for wechat-notify."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .api.client import WeChatClient
from .config import DEFAULT_CONFIG_PATH, get_default_config_toml, load_config
from .core.notifier import Notifier
from .errors import ConfigError
from .utils.logging import setup_logging
from .utils.terminal import read_stdin

logger = logging.getLogger(__name__)

MAX_EXIT_STATUS = 255  # larger values wrap around in the OS

TEMPLATE_FORMAT = """\
Template Format:
    timestamp: 1452504535
    service:   some-service
    event:     some-event
    action:    some-action
    host:      some-host

    you can type your multi-line message here...

Exit status is the number of recipients the message could not be sent to,
capped at 255.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wechat-notify",
        description="Send templated message to specified WeChat users.",
        epilog=TEMPLATE_FORMAT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "openids",
        nargs="*",
        metavar="OPENID[@label]",
        help="Recipient OpenID; anything after @ is ignored",
    )

    parser.add_argument(
        "--raw",
        action="store_true",
        help="Send un-templated message",
    )

    parser.add_argument(
        "--no-auto-url",
        action="store_true",
        help="Don't generate URL when URL is empty and message is too long",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to configuration file",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show default configuration and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.show_config:
        print(get_default_config_toml())
        return 0

    if not args.openids:
        print("Please provide at least one OPENID.", file=sys.stderr)
        return 1

    try:
        config = load_config(args.config)
        config.validate()
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 1

    # Setup logging
    setup_logging(verbose=args.verbose, log_file=config.log_file)

    try:
        body = read_stdin()
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 1

    mode = "raw" if args.raw else "template"
    logger.debug(f"Sending {mode} message to {len(args.openids)} recipient(s)")

    client = WeChatClient(config.wechat)
    notifier = Notifier(
        client,
        template_id=config.wechat.template_id,
        raw=args.raw,
        auto_url=not args.no_auto_url,
        auto_url_prefix=config.wechat.auto_url_prefix,
    )

    try:
        return min(notifier.notify(args.openids, body), MAX_EXIT_STATUS)
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
