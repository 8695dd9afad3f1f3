"""Shortcode forwarding: resolve a shortcode and answer with a redirect."""

import logging

from fastapi import status
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from linkfwd.repository import LinkRepository
from linkfwd.errors import NotFoundError, StoreError
from linkfwd.common.url_builder import build_not_found_redirect

logger = logging.getLogger("linkfwd.web.forwarding")


async def forward(
    repository: LinkRepository,
    shortcode: str,
    not_found_policy: str = "redirect",
    path_prefix: str = "",
) -> Response:
    """Resolve a shortcode into an HTTP response.

    Args:
        repository: Link repository
        shortcode: Shortcode taken from the request path
        not_found_policy: "redirect" to send unknown shortcodes to the management
            page with an error marker, "not_found" for a bare 404
        path_prefix: Mount path used when building the management page location

    Returns:
        302 to the stored URL, 400 for an empty shortcode, the not-found policy
        response for an unknown shortcode, or 500 when the store fails
    """
    if not shortcode:
        return PlainTextResponse("Shortcode is required", status_code=status.HTTP_400_BAD_REQUEST)

    try:
        url = await repository.lookup(shortcode)
    except NotFoundError:
        if not_found_policy == "not_found":
            logger.info(f"Link not found for shortcode: {shortcode}")
            return PlainTextResponse("Link not found", status_code=status.HTTP_404_NOT_FOUND)

        location = build_not_found_redirect(shortcode, path_prefix)
        logger.info(f"Link not found for shortcode: {shortcode}, redirecting to {location}")
        return RedirectResponse(url=location, status_code=status.HTTP_302_FOUND)
    except StoreError:
        return PlainTextResponse(
            "Failed to resolve link",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.info(f"Forwarding {shortcode} to {url}")
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
