"""Request models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SearchRequest(BaseModel):
    """Request model for destination search."""

    query: str = Field(..., max_length=100, description="Raw search input")
    max_results: Optional[int] = Field(
        None, ge=1, le=50, description="Maximum number of suggestions to return"
    )
    include_suggestions: bool = Field(
        default=True, description="Whether to include 'did you mean' names for no-match queries"
    )


class RouteRequest(BaseModel):
    """Request model for a route view."""

    destination_id: str = Field(..., min_length=1, description="Destination node id")
    start_id: Optional[str] = Field(None, description="Start node id (defaults to the kiosk)")
    floor: Optional[int] = Field(None, description="Floor currently shown on the map")

    @field_validator("destination_id")
    @classmethod
    def validate_destination_id(cls, v: str) -> str:
        """Validate and normalize the destination id."""
        if not v.strip():
            raise ValueError("Destination id cannot be empty")
        return v.strip()
