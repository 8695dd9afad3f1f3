"""Validation and normalization utilities for the link forwarder."""

from typing import Tuple

from ..errors import ValidationError

RECOGNIZED_SCHEMES = ("http://", "https://")
DEFAULT_SCHEME = "https://"


def normalize_url(url: str) -> str:
    """Prepend https:// unless the URL already starts with http:// or https://.
    
    Args:
        url: The destination URL as entered
        
    Returns:
        URL guaranteed to carry a recognized scheme prefix
    """
    if url.startswith(RECOGNIZED_SCHEMES):
        return url
    return DEFAULT_SCHEME + url


def require_link_fields(shortcode: str, url: str) -> Tuple[str, str]:
    """Check that both link fields are present.
    
    Args:
        shortcode: The shortcode
        url: The destination URL
        
    Returns:
        Tuple of (shortcode, url)
        
    Raises:
        ValidationError: If either field is missing or empty
    """
    if not shortcode or not url:
        raise ValidationError("Shortcode and URL are required")
    return shortcode, url


def require_shortcode(shortcode: str) -> str:
    """Raise ValidationError for an empty shortcode."""
    if not shortcode:
        raise ValidationError("Shortcode is required")
    return shortcode
