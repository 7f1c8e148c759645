"""Response models for API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .graph import RouteStep


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SuggestionResult(BaseModel):
    """A ranked destination ready for display."""

    id: str = Field(..., description="Destination node id")
    name: str = Field(..., description="Destination name")
    floor: int = Field(..., description="Floor of the destination")
    score: int = Field(..., ge=0, le=100, description="Relevance score (0-100)")
    highlighted_name: str = Field(..., description="Name with the query wrapped in highlight markup")


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Total number of results")
    results: List[SuggestionResult] = Field(..., description="Ranked suggestions")
    suggestions: Optional[List[str]] = Field(None, description="Alternative names if no match")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class CategoryResponse(BaseModel):
    """Response for a category tap."""

    category: str = Field(..., description="Selected category")
    total_results: int = Field(..., description="Number of matching destinations")
    results: List[SuggestionResult] = Field(..., description="Matching destinations in load order")
    auto_select: Optional[str] = Field(None, description="Destination id when exactly one matches")


class DestinationResponse(BaseModel):
    """A single destination node."""

    id: str
    name: str
    floor: int
    search_keywords: List[str] = Field(default_factory=list)


class NumberedStep(BaseModel):
    """Route step with its display position."""

    number: int = Field(..., ge=1, description="1-based position in the route")
    step: RouteStep


class RouteResponse(BaseModel):
    """Route view for a selected destination."""

    title: str = Field(..., description="Heading, e.g. 'Directions to Restroom'")
    description: str = Field(..., description="From/to summary")
    start_id: str = Field(..., description="Start node id")
    destination: DestinationResponse
    current_floor: int = Field(..., description="Floor the map view is showing")
    steps: List[NumberedStep] = Field(..., description="All steps of the route")
    floor_steps: List[NumberedStep] = Field(..., description="Steps drawn on the current floor")
    highlight_path_ids: List[str] = Field(..., description="Path elements to highlight on the current floor")
    start_marker_id: str = Field(..., description="Start marker element id")
    end_marker_id: str = Field(..., description="End marker element id")
    show_start_marker: bool = Field(..., description="Whether the start marker is on the current floor")
    show_end_marker: bool = Field(..., description="Whether the end marker is on the current floor")
    handoff_url: str = Field(..., description="URL to encode in the mobile hand-off QR code")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
