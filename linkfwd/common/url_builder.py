"""URL building utilities for the link forwarder."""

from urllib.parse import urlencode

NOT_FOUND_ERROR = "not_found"


def build_short_url(
    shortcode: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.
    
    Args:
        shortcode: The shortcode
        base_url: Base URL (e.g., https://example.com)
        path_prefix: Optional path prefix (e.g., /go)
        
    Returns:
        Complete short URL
    """
    base = base_url.rstrip("/")
    prefix = path_prefix.strip("/")
    
    if prefix:
        return f"{base}/{prefix}/{shortcode}"
    return f"{base}/{shortcode}"


def build_not_found_redirect(shortcode: str, path_prefix: str = "") -> str:
    """Build the management page location offering to create a missing shortcode.
    
    Args:
        shortcode: The shortcode that was not found
        path_prefix: Optional path prefix the app is mounted under
        
    Returns:
        Relative URL like /?shortcode=abc&error=not_found
    """
    prefix = path_prefix.strip("/")
    root = f"/{prefix}/" if prefix else "/"
    query = urlencode({"shortcode": shortcode, "error": NOT_FOUND_ERROR})
    return f"{root}?{query}"
