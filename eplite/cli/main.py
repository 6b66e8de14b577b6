"""
Main CLI entry point for eplite.

Invokes Etherpad API operations from the shell.
"""

import argparse
import logging
import sys

from eplite import __version__

from .._client import EPLite
from .._exceptions import ConfigurationError
from .registry import registry
from .util import graceful_main


def create_client(args: argparse.Namespace) -> EPLite | None:
    """Create a client from global options, printing guidance on failure."""
    try:
        return EPLite(
            api_key=args.api_key,
            base_url=args.url,
            api_version=args.api_version,
            timeout=args.timeout,
        )
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eplite",
        description="Etherpad HTTP API client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--api-key", help="API key (or set ETHERPAD_API_KEY)")
    parser.add_argument("--url", help="Server base URL (or set ETHERPAD_URL)")
    parser.add_argument("--api-version", help="API version (or set ETHERPAD_API_VERSION)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    for command in registry.get_primary_commands():
        subparser = subparsers.add_parser(
            command.name, aliases=command.aliases, help=command.description
        )
        command.add_arguments(subparser)
    return parser


def _real_main(argv: list[str]) -> int:
    registry.clear()
    registry.auto_discover_commands()

    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )

    command = registry.get_command(args.command)

    if not command.requires_client:
        return command.execute(args, None)

    client = create_client(args)
    if client is None:
        return 1
    with client:
        return command.execute(args, client)


def main() -> None:
    """Main CLI entry point with graceful interrupt handling."""
    code = graceful_main(_real_main, sys.argv[1:])
    raise SystemExit(code)


if __name__ == "__main__":
    main()
