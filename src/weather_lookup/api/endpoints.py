"""API endpoints for the geocoding proxy."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from weather_lookup import __version__
from weather_lookup.places.client import GooglePlacesClient

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Missing input parameter"

# Create router
router = APIRouter(prefix="/api", tags=["places"])


class InvalidRequest(Exception):
    """Raised when a required query parameter is missing or empty."""

    def __init__(self, message: str = MISSING_INPUT_MESSAGE):
        super().__init__(message)
        self.message = message


def get_places_client() -> GooglePlacesClient:
    """Dependency to get a places client bound to the server credential."""
    return GooglePlacesClient()


def require_input(value: Optional[str]) -> str:
    """Check presence of the ``input`` query parameter.

    Raises:
        InvalidRequest: If the value is missing or empty
    """
    if not value:
        logger.warning("Rejected request without input parameter")
        raise InvalidRequest()
    return value


@router.get("/autocomplete")
async def autocomplete(
    input: Optional[str] = Query(None, description="Free text to autocomplete"),
    places_client: GooglePlacesClient = Depends(get_places_client)
) -> JSONResponse:
    """Relay a place autocomplete query.

    Args:
        input: Free text typed by the user
        places_client: Injected Google Places client

    Returns:
        Upstream autocomplete JSON, unchanged

    Raises:
        InvalidRequest: If ``input`` is missing or empty
        UpstreamError: If the upstream call fails
    """
    text = require_input(input)
    async with places_client:
        data = await places_client.autocomplete(text)
    return JSONResponse(content=data)


@router.get("/place/details")
async def place_details(
    input: Optional[str] = Query(None, description="Place identifier from an autocomplete prediction"),
    places_client: GooglePlacesClient = Depends(get_places_client)
) -> JSONResponse:
    """Relay a place details lookup.

    Args:
        input: Place identifier
        places_client: Injected Google Places client

    Returns:
        Upstream details JSON, unchanged

    Raises:
        InvalidRequest: If ``input`` is missing or empty
        UpstreamError: If the upstream call fails
    """
    place_id = require_input(input)
    async with places_client:
        data = await places_client.place_details(place_id)
    return JSONResponse(content=data)


@router.get("", tags=["root"])
async def api_info() -> dict:
    """API information endpoint.

    Returns:
        Basic service information
    """
    return {
        "service": "Weather Lookup Geocoding Proxy",
        "version": __version__,
        "endpoints": {
            "autocomplete": "/api/autocomplete?input=<text>",
            "place_details": "/api/place/details?input=<place_id>",
            "health": "/health"
        }
    }
