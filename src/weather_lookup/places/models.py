"""Data models for the Google Places proxy."""

from typing import List, Optional

from pydantic import BaseModel, Field


class PlaceSuggestion(BaseModel):
    """One autocomplete prediction."""
    place_id: str = Field(..., description="Opaque Google place identifier")
    description: str = Field(..., description="Human-readable place description")


class AutocompleteResponse(BaseModel):
    """Subset of the upstream autocomplete response the client reads."""
    predictions: Optional[List[PlaceSuggestion]] = Field(None, description="Place predictions")
    status: Optional[str] = Field(None, description="Upstream status code")


class PlaceLocation(BaseModel):
    """Latitude/longitude pair as returned by Places (note ``lng``)."""
    lat: float
    lng: float


class PlaceGeometry(BaseModel):
    location: PlaceLocation


class PlaceResult(BaseModel):
    geometry: PlaceGeometry
    name: Optional[str] = None


class PlaceDetailsResponse(BaseModel):
    """Subset of the upstream place details response the client reads."""
    result: PlaceResult = Field(..., description="Resolved place")
    status: Optional[str] = Field(None, description="Upstream status code")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
