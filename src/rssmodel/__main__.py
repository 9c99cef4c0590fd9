# ABOUTME: CLI entry point for rssmodel.
# ABOUTME: Provides subcommands: decode, fetch, load.

import argparse
import logging
import sys
from pathlib import Path

import structlog

from rssmodel.config import Settings, get_settings
from rssmodel.errors import DecodeError, FetchError
from rssmodel.feeds import decode, fetch, load_feed


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog to write to stderr, keeping stdout for command output.

    ``log_format=json`` emits one JSON object per line with ISO timestamps;
    the console format is colored only when stderr is a terminal.
    """
    settings = settings or get_settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    renderer: structlog.types.Processor
    if settings.log_format == "json":
        timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
        renderer = structlog.processors.JSONRenderer()
    else:
        timestamper = structlog.processors.TimeStamper(fmt="%H:%M:%S")
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            timestamper,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _settings_for(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    if getattr(args, "timeout", None) is not None:
        settings = settings.model_copy(update={"feed_timeout": args.timeout})
    return settings


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode a feed read from a file (or stdin) and print it as JSON."""
    log = structlog.get_logger()

    if args.path == "-":
        content = sys.stdin.read()
    else:
        content = Path(args.path).read_text(encoding="utf-8")

    try:
        feed = decode(content)
    except DecodeError as e:
        log.error("decode_failed", path=args.path, error=str(e))
        return 1

    print(feed.model_dump_json(indent=2))
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Fetch a feed and print the raw body."""
    log = structlog.get_logger()

    try:
        content = fetch(args.url, _settings_for(args))
    except FetchError as e:
        log.error("fetch_failed", url=args.url, error=str(e))
        return 1

    print(content)
    return 0


def cmd_load(args: argparse.Namespace) -> int:
    """Fetch and decode a feed, printing it as JSON."""
    log = structlog.get_logger()

    try:
        feed = load_feed(args.url, _settings_for(args))
    except FetchError as e:
        log.error("fetch_failed", url=args.url, error=str(e))
        return 1
    except DecodeError as e:
        log.error("decode_failed", url=args.url, error=str(e))
        return 1

    print(feed.model_dump_json(indent=2))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="rssmodel",
        description="rssmodel - decode RSS 2.0 feeds into typed records",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: RSSMODEL_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # decode command
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a feed stored in a file",
    )
    decode_parser.add_argument(
        "path",
        help="Path of the RSS document, or - to read stdin",
    )

    # fetch command
    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Download a feed and print the raw document",
    )
    fetch_parser.add_argument("url", help="Feed URL")
    fetch_parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: RSSMODEL_FEED_TIMEOUT or 10)",
    )

    # load command
    load_parser = subparsers.add_parser(
        "load",
        help="Download and decode a feed",
    )
    load_parser.add_argument("url", help="Feed URL")
    load_parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: RSSMODEL_FEED_TIMEOUT or 10)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})
    configure_logging(settings)

    commands = {
        "decode": cmd_decode,
        "fetch": cmd_fetch,
        "load": cmd_load,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
