"""API routes implementation."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from datetime import datetime, timezone

from .schemas import (
    LinkRequest,
    LinkOut,
    Envelope,
    LinkEnvelope,
    LinkListEnvelope,
    HealthResponse,
)
from .errors import envelope_response
from linkfwd.errors import ValidationError, NotFoundError, StoreError

router = APIRouter()
logger = logging.getLogger("linkfwd.web.api")


@router.get(
    "/links",
    response_model=LinkListEnvelope,
    responses={
        500: {"model": Envelope, "description": "Store failure"},
    },
    summary="List links",
    description="List every link, newest created first.",
)
async def list_links(request: Request):
    """List all links."""
    repository = request.app.state.repository

    try:
        links = await repository.list_all()
    except StoreError:
        return envelope_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to retrieve links")

    return LinkListEnvelope(
        success=True,
        message="Links retrieved successfully",
        data=[LinkOut.from_link(link) for link in links],
    )


@router.post(
    "/links",
    response_model=LinkEnvelope,
    responses={
        400: {"model": Envelope, "description": "Invalid JSON or missing fields"},
        500: {"model": Envelope, "description": "Store failure"},
    },
    summary="Create or replace link",
    description="Save a shortcode -> URL link, replacing the URL of an existing shortcode.",
)
async def save_link(request: Request, body: LinkRequest):
    """Create or replace a link."""
    repository = request.app.state.repository

    try:
        link = await repository.upsert(body.shortcode, body.url)
    except ValidationError as e:
        return envelope_response(status.HTTP_400_BAD_REQUEST, str(e))
    except StoreError:
        return envelope_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to save link")

    return LinkEnvelope(
        success=True,
        message="Link saved successfully",
        data=LinkOut.from_link(link),
    )


@router.delete(
    "/links/{shortcode}",
    response_model=Envelope,
    responses={
        400: {"model": Envelope, "description": "Empty shortcode"},
        404: {"model": Envelope, "description": "Shortcode not found"},
        500: {"model": Envelope, "description": "Store failure"},
    },
    summary="Delete link",
)
async def delete_link(request: Request, shortcode: str):
    """Delete a link by shortcode."""
    repository = request.app.state.repository

    try:
        await repository.delete(shortcode)
    except ValidationError as e:
        return envelope_response(status.HTTP_400_BAD_REQUEST, str(e))
    except NotFoundError as e:
        return envelope_response(status.HTTP_404_NOT_FOUND, str(e))
    except StoreError:
        return envelope_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete link")

    return Envelope(success=True, message="Link deleted successfully")


@router.delete("/links/", response_model=Envelope, include_in_schema=False)
async def delete_link_without_shortcode():
    """DELETE with an empty shortcode segment."""
    return envelope_response(status.HTTP_400_BAD_REQUEST, "Shortcode is required")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check that the link store is reachable.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    repository = request.app.state.repository

    health = await repository.health_check()
    body = HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )

    if not health["overall"]:
        logger.warning("Health check failed: database unreachable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(mode="json"),
        )
    return body
