"""Reverse-proxy header handling for the link forwarder."""

from typing import Mapping, NamedTuple, Optional


class ForwardedInfo(NamedTuple):
    """X-Forwarded-* values sent by a reverse proxy."""

    proto: Optional[str]
    host: Optional[str]
    client: Optional[str]
    prefix: str


def _normalize_prefix(value: Optional[str]) -> str:
    p = (value or "").strip().strip("/")
    return "/" + p if p else ""


def extract_forwarded_headers(headers: Mapping[str, str]) -> ForwardedInfo:
    """Extract X-Forwarded-* headers, case-insensitively.

    Args:
        headers: Request headers mapping

    Returns:
        ForwardedInfo; prefix is normalized to a leading slash and no trailing slash
    """
    lowered = {k.lower(): v for k, v in headers.items()}
    return ForwardedInfo(
        proto=lowered.get("x-forwarded-proto"),
        host=lowered.get("x-forwarded-host"),
        client=lowered.get("x-forwarded-for"),
        prefix=_normalize_prefix(lowered.get("x-forwarded-prefix")),
    )


def get_forwarded_path_prefix(headers: Mapping[str, str]) -> str:
    """Mount path stripped by the proxy (e.g. "/go"), or '' when served directly."""
    return extract_forwarded_headers(headers).prefix


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Build the externally visible base URL.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + host
    3. Fallback base URL

    Args:
        headers: Request headers
        fallback_base_url: Base URL to use when the request carries none
        request_scheme: Request scheme (http/https)
        request_host: Request host

    Returns:
        Base URL without trailing slash (e.g., https://example.com)
    """
    forwarded = extract_forwarded_headers(headers)

    if forwarded.proto and forwarded.host:
        return f"{forwarded.proto}://{forwarded.host}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")
