"""
Command-line interface for a URL shortener store file.

Works directly on the JSON document the server uses with the file
backend. Do not run it against a file a live server is writing to.

Usage:
    shortener-cli [--store-path PATH] add <url>
    shortener-cli [--store-path PATH] get <short_code>
    shortener-cli [--store-path PATH] remove <short_code>
    shortener-cli [--store-path PATH] list
"""

import argparse
import asyncio
import json
import os
import sys
from typing import List, Optional

from .common.logging_config import setup_logging
from .errors import ShortenerError
from .service import ShortenerService
from .shortcode import DEFAULT_CODE_LENGTH
from .store.file import FileStore


class ShortenerCLI:
    """Command-line interface for URL shortener."""

    def __init__(
        self,
        store_path: str,
        code_length: int = DEFAULT_CODE_LENGTH,
        verbose: bool = False,
    ):
        self.store_path = store_path
        self.code_length = code_length
        # Logs go to stderr so stdout stays machine-readable
        self.logger = setup_logging(
            level="DEBUG" if verbose else "WARNING",
            stream=sys.stderr,
        )
        self.service: Optional[ShortenerService] = None

    def initialize(self):
        """Open the store and build the service."""
        store = FileStore(self.store_path, logger=self.logger.getChild("store"))
        self.service = ShortenerService(
            store=store,
            code_length=self.code_length,
            logger=self.logger.getChild("service"),
        )

    async def cleanup(self):
        if self.service:
            await self.service.close()

    async def add(self, url: str) -> int:
        result = await self.service.shorten(url)
        _print_success({
            "short_code": result["short_code"],
            "long_url": result["long_url"],
        })
        return 0

    async def get(self, short_code: str) -> int:
        long_url = await self.service.resolve(short_code)
        _print_success({"short_code": short_code, "long_url": long_url})
        return 0

    async def remove(self, short_code: str) -> int:
        await self.service.delete(short_code)
        _print_success({"short_code": short_code, "message": "deleted"})
        return 0

    async def list_urls(self) -> int:
        urls = await self.service.list_urls()
        _print_success({"count": len(urls), "urls": urls})
        return 0


def _print_success(payload: dict) -> None:
    print(json.dumps({"success": True, **payload}, indent=2))


def _print_failure(error: str) -> None:
    print(json.dumps({"success": False, "error": error}, indent=2), file=sys.stderr)


def _code_length(value: str) -> int:
    """argparse type for --code-length: an int a SHA-1 hex digest can supply."""
    try:
        length = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if not 1 <= length <= 40:
        raise argparse.ArgumentTypeError(f"must be between 1 and 40, got {length}")
    return length


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortener-cli",
        description="Manage a URL shortener store file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s add http://example.com

  # Look up a short code
  %(prog)s get 89dce6a446

  # Delete a short code
  %(prog)s remove 89dce6a446

  # Dump every mapping
  %(prog)s list
        """
    )

    parser.add_argument(
        "--store-path",
        default=os.getenv("STORE_PATH", "store.json"),
        help="Store document path (default: from STORE_PATH env or store.json)"
    )

    parser.add_argument(
        "--code-length",
        type=_code_length,
        default=os.getenv("SHORT_CODE_LENGTH", str(DEFAULT_CODE_LENGTH)),
        help="Hex characters per short code (default: %(default)s)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    add_parser = subparsers.add_parser("add", help="Shorten a URL")
    add_parser.add_argument("url", help="URL to shorten")

    get_parser = subparsers.add_parser("get", help="Get original URL")
    get_parser.add_argument("short_code", help="Short code to lookup")

    remove_parser = subparsers.add_parser("remove", help="Delete a short code")
    remove_parser.add_argument("short_code", help="Short code to delete")

    subparsers.add_parser("list", help="List all mappings")

    return parser


async def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and execute one command.

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = ShortenerCLI(
        store_path=args.store_path,
        code_length=args.code_length,
        verbose=args.verbose,
    )

    try:
        cli.initialize()

        if args.command == "add":
            return await cli.add(args.url)
        elif args.command == "get":
            return await cli.get(args.short_code)
        elif args.command == "remove":
            return await cli.remove(args.short_code)
        elif args.command == "list":
            return await cli.list_urls()

        parser.print_help()
        return 1

    except ShortenerError as e:
        _print_failure(str(e))
        return 1

    finally:
        await cli.cleanup()


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entry point."""
    return asyncio.run(run(argv))


if __name__ == "__main__":
    sys.exit(main())
