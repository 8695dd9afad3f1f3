#!/usr/bin/env python3
"""
Command-line client for the link forwarder management API.

Usage:
    linkfwd add <shortcode,url>
    linkfwd list
    linkfwd delete <shortcode>

Every command talks to a running server over HTTP; there is no direct
database access.
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from urllib.parse import quote

import requests

from .common.logging_config import setup_logging
from .common.url_builder import build_short_url

DEFAULT_SERVER_URL = "http://localhost:8080"


class LinkForwarderCLI:
    """Command-line client for the link forwarder API."""

    def __init__(
        self,
        server_url: str = DEFAULT_SERVER_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        json_output: bool = False,
        verbose: bool = False,
        out=None,
    ):
        self.server_url = server_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.json_output = json_output
        self.out = out or sys.stdout
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Send a request and decode the response envelope.

        Raises:
            requests.RequestException: On connection failure
            ValueError: If the body is not a JSON envelope
        """
        url = f"{self.server_url}{path}"
        self.logger.debug(f"{method} {url}")
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        self.logger.debug(f"Status: {response.status_code}")
        envelope = response.json()
        if not isinstance(envelope, dict) or "success" not in envelope:
            raise ValueError(f"Unexpected response (HTTP {response.status_code})")
        return envelope

    def _call(self, method: str, path: str, **kwargs) -> Optional[Dict[str, Any]]:
        """Like _request, but prints the error and returns None on failure."""
        try:
            envelope = self._request(method, path, **kwargs)
        except ValueError as e:
            self._print(f"Error: Failed to decode response: {e}")
            return None
        except requests.RequestException as e:
            self._print(f"Error: Failed to connect to server: {e}")
            return None

        if self.json_output:
            self._print(json.dumps(envelope, indent=2))
        elif not envelope.get("success"):
            self._print(f"Error: {envelope.get('message', 'unknown error')}")
        return envelope

    @staticmethod
    def parse_add_argument(value: str) -> Tuple[str, str]:
        """Split 'shortcode,url' into its parts.

        Raises:
            ValueError: If the format is wrong or a part is empty
        """
        parts = value.split(",", 1)
        if len(parts) != 2:
            raise ValueError("Invalid format. Use: shortcode,url")

        shortcode, url = (part.strip() for part in parts)
        if not shortcode or not url:
            raise ValueError("Both shortcode and URL are required")
        return shortcode, url

    def add(self, value: str) -> int:
        """Add or replace a link."""
        try:
            shortcode, url = self.parse_add_argument(value)
        except ValueError as e:
            self._print(f"Error: {e}")
            return 1

        envelope = self._call("POST", "/api/links", json={"shortcode": shortcode, "url": url})
        if not envelope or not envelope.get("success"):
            return 1

        if not self.json_output:
            stored = envelope.get("data") or {}
            self._print(f"✓ Link added: {shortcode} -> {stored.get('url', url)}")
            self._print(f"  {build_short_url(shortcode, self.server_url)}")
        return 0

    def list_links(self) -> int:
        """Print every link as a table."""
        envelope = self._call("GET", "/api/links")
        if not envelope or not envelope.get("success"):
            return 1
        if self.json_output:
            return 0

        links: List[Dict[str, Any]] = envelope.get("data") or []
        if not links:
            self._print("No links found")
            return 0

        rows = [("SHORTCODE", "URL"), ("---------", "---")]
        rows += [(str(link.get("shortcode", "")), str(link.get("url", ""))) for link in links]
        width = max(len(code) for code, _ in rows)
        for code, url in rows:
            self._print(f"{code.ljust(width)}   {url}")
        return 0

    def delete(self, shortcode: str) -> int:
        """Delete a link."""
        shortcode = shortcode.strip()
        if not shortcode:
            self._print("Error: Shortcode is required")
            return 1

        path = f"/api/links/{quote(shortcode, safe='')}"
        envelope = self._call("DELETE", path)
        if not envelope or not envelope.get("success"):
            return 1

        if not self.json_output:
            self._print(f"✓ Link deleted: {shortcode}")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkfwd",
        description="Link Forwarder CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s add google,www.google.com
  %(prog)s add gh,github.com
  %(prog)s list
  %(prog)s delete google
        """
    )

    parser.add_argument(
        "--server",
        default=os.getenv("LINKFWD_SERVER", DEFAULT_SERVER_URL),
        help=f"Server URL (default: from LINKFWD_SERVER env or {DEFAULT_SERVER_URL})"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print raw response envelopes"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    add_parser = subparsers.add_parser("add", help="Add a new link")
    add_parser.add_argument("link", help="shortcode,url")

    subparsers.add_parser("list", help="List all links")

    delete_parser = subparsers.add_parser("delete", help="Delete a link")
    delete_parser.add_argument("shortcode", help="Shortcode to delete")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = LinkForwarderCLI(
        server_url=args.server,
        json_output=args.json,
        verbose=args.verbose,
    )

    if args.command == "add":
        return cli.add(args.link)
    elif args.command == "list":
        return cli.list_links()
    elif args.command == "delete":
        return cli.delete(args.shortcode)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
