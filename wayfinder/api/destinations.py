"""Destination listing API endpoints."""

from fastapi import APIRouter, HTTPException, Path

from ..core.graph import find_node
from ..models.response import DestinationResponse
from .utils import require_graph, to_destination

router = APIRouter(prefix="/api/v1", tags=["destinations"])


@router.get(
    "/destinations",
    response_model=list[DestinationResponse],
    summary="List destinations",
    description="Get every searchable destination in load order"
)
async def list_destinations() -> list[DestinationResponse]:
    graph = require_graph()
    return [to_destination(node) for node in graph.nodes if node.is_destination]


@router.get(
    "/destinations/{node_id}",
    response_model=DestinationResponse,
    summary="Get destination",
    description="Get a single destination by node id"
)
async def get_destination(
    node_id: str = Path(..., description="Destination node id")
) -> DestinationResponse:
    graph = require_graph()
    node = find_node(graph, node_id)
    if node is None or not node.is_destination:
        raise HTTPException(status_code=404, detail=f"Destination '{node_id}' not found")
    return to_destination(node)
