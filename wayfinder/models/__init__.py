"""Data models for the wayfinder service."""

from .graph import DestinationNode, LibraryGraph, RouteStep
from .request import RouteRequest, SearchRequest
from .response import (
    CategoryResponse,
    DestinationResponse,
    ErrorResponse,
    HealthResponse,
    NumberedStep,
    RouteResponse,
    SearchResponse,
    SuggestionResult,
)

__all__ = [
    "DestinationNode",
    "LibraryGraph",
    "RouteStep",
    "RouteRequest",
    "SearchRequest",
    "CategoryResponse",
    "DestinationResponse",
    "ErrorResponse",
    "HealthResponse",
    "NumberedStep",
    "RouteResponse",
    "SearchResponse",
    "SuggestionResult",
]
