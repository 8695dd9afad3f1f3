"""Common utilities for the link forwarder."""

from .validators import normalize_url, require_link_fields, require_shortcode
from .headers import extract_forwarded_headers, build_base_url, get_forwarded_path_prefix
from .url_builder import build_short_url, build_not_found_redirect
from .logging_config import setup_logging

__all__ = [
    "normalize_url",
    "require_link_fields",
    "require_shortcode",
    "extract_forwarded_headers",
    "build_base_url",
    "get_forwarded_path_prefix",
    "build_short_url",
    "build_not_found_redirect",
    "setup_logging",
]
