#!/usr/bin/env python3
"""
Validation script for the link forwarder service.
Exercises a live running service end to end: save, list, redirect, delete.

Usage:
    python validate_service.py --url http://localhost:8080
"""

import argparse
import sys
import time
from typing import List, NamedTuple, Optional

import requests


class CheckResult(NamedTuple):
    name: str
    passed: bool
    details: str


class ServiceValidator:
    """Runs checks against a live link forwarder and records the outcomes."""

    def __init__(self, base_url: str = "http://localhost:8080", timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.results: List[CheckResult] = []
        self.shortcode = f"validate{int(time.time())}"

    def record(self, name: str, passed: bool, details: str = "") -> bool:
        self.results.append(CheckResult(name, passed, details))
        mark = "PASS" if passed else "FAIL"
        print(f"[{mark}] {name}" + (f": {details}" if details else ""))
        return passed

    def test_health_check(self) -> bool:
        """GET /api/health reports a healthy store."""
        try:
            response = self.session.get(f"{self.base_url}/api/health", timeout=self.timeout)
            data = response.json()
            is_healthy = response.status_code == 200 and data.get("status") == "healthy"
            return self.record("Health Check", is_healthy, f"database={data.get('database')}")
        except (requests.RequestException, ValueError) as e:
            return self.record("Health Check", False, str(e))

    def _api_url(self, path: str = "") -> str:
        return f"{self.base_url}/api/links{path}"

    def test_save_link(self) -> Optional[str]:
        """A scheme-less URL must come back with https:// prepended."""
        try:
            response = self.session.post(
                self._api_url(),
                json={"shortcode": self.shortcode, "url": "example.com/validate"},
                timeout=self.timeout
            )
            stored_url = (response.json().get("data") or {}).get("url")
        except (requests.RequestException, ValueError) as e:
            self.record("Save Link", False, str(e))
            return None

        passed = response.status_code == 200 and stored_url == "https://example.com/validate"
        self.record("Save Link", passed, f"stored {stored_url}")
        return self.shortcode if passed else None

    def test_list_links(self, shortcode: str) -> bool:
        try:
            response = self.session.get(self._api_url(), timeout=self.timeout)
            codes = [link.get("shortcode") for link in response.json().get("data") or []]
        except (requests.RequestException, ValueError) as e:
            return self.record("List Links", False, str(e))
        return self.record("List Links", shortcode in codes, f"{len(codes)} links listed")

    def test_redirect(self, shortcode: str) -> bool:
        try:
            response = self.session.get(
                f"{self.base_url}/{shortcode}",
                allow_redirects=False,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            return self.record("Redirect", False, str(e))

        location = response.headers.get("Location")
        passed = response.status_code == 302 and location == "https://example.com/validate"
        return self.record("Redirect", passed, f"{response.status_code} -> {location}")

    def test_delete(self, shortcode: str) -> bool:
        """Deleting twice answers 200 then 404."""
        try:
            statuses = [
                self.session.delete(self._api_url(f"/{shortcode}"), timeout=self.timeout).status_code
                for _ in range(2)
            ]
        except requests.RequestException as e:
            return self.record("Delete Link", False, str(e))
        return self.record("Delete Link", statuses == [200, 404], f"statuses {statuses}")

    def test_missing_fields(self) -> bool:
        try:
            response = self.session.post(
                self._api_url(),
                json={"shortcode": "", "url": "a.com"},
                timeout=self.timeout
            )
            envelope = response.json()
        except (requests.RequestException, ValueError) as e:
            return self.record("Missing Field Rejection", False, str(e))

        passed = response.status_code == 400 and envelope.get("success") is False
        return self.record("Missing Field Rejection", passed, envelope.get("message", ""))

    def test_unknown_shortcode(self) -> bool:
        """Either not-found policy is accepted."""
        try:
            response = self.session.get(
                f"{self.base_url}/{self.shortcode}-missing",
                allow_redirects=False,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            return self.record("Unknown Shortcode", False, str(e))

        if response.status_code == 302:
            location = response.headers.get("Location", "")
            return self.record("Unknown Shortcode", "error=not_found" in location, f"redirect -> {location}")
        return self.record("Unknown Shortcode", response.status_code == 404, f"status {response.status_code}")

    def test_web_interface(self) -> bool:
        try:
            response = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        except requests.RequestException as e:
            return self.record("Web Interface", False, str(e))

        content_type = response.headers.get("content-type", "")
        return self.record(
            "Web Interface",
            response.status_code == 200 and "text/html" in content_type,
            content_type
        )

    def run_all_tests(self) -> bool:
        """Run every check; stops early when the service is unreachable."""
        print(f"Validating link forwarder at {self.base_url}\n")

        if not self.test_health_check():
            print(f"\nService at {self.base_url} is not healthy; skipping remaining checks.")
            return False

        shortcode = self.test_save_link()
        if shortcode:
            self.test_list_links(shortcode)
            self.test_redirect(shortcode)
            self.test_delete(shortcode)

        self.test_missing_fields()
        self.test_unknown_shortcode()
        self.test_web_interface()

        self.print_summary()
        return all(result.passed for result in self.results)

    def print_summary(self):
        failed = [result for result in self.results if not result.passed]
        print(f"\n{len(self.results) - len(failed)}/{len(self.results)} checks passed")
        for result in failed:
            print(f"  failed: {result.name} ({result.details})")


def main():
    parser = argparse.ArgumentParser(description="Validate a running link forwarder service")
    parser.add_argument(
        "--url",
        default="http://localhost:8080",
        help="Base URL of the service (default: http://localhost:8080)"
    )
    parser.add_argument("--timeout", type=float, default=5.0, help="Per-request timeout in seconds")
    args = parser.parse_args()

    validator = ServiceValidator(args.url, timeout=args.timeout)
    try:
        sys.exit(0 if validator.run_all_tests() else 1)
    except KeyboardInterrupt:
        print("\nValidation interrupted")
        sys.exit(2)


if __name__ == "__main__":
    main()
