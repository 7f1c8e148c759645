"""Route and mobile hand-off API endpoints."""

from typing import List, Optional

import structlog
from fastapi import APIRouter, HTTPException, Path, Query

from ..config import get_settings
from ..core.graph import (
    end_marker_id,
    find_node,
    handoff_url,
    highlight_path_ids,
    resolve_handoff,
    step_floor,
)
from ..core.session import (
    DestinationNotFoundError,
    SessionState,
    select_destination,
    switch_floor,
)
from ..models.graph import LibraryGraph, RouteStep
from ..models.request import RouteRequest
from ..models.response import NumberedStep, RouteResponse
from .utils import require_graph, to_destination

router = APIRouter(prefix="/api/v1", tags=["routes"])
settings = get_settings()
logger = structlog.get_logger(__name__)


def _number_steps(route: List[RouteStep], floor: Optional[int] = None) -> List[NumberedStep]:
    return [
        NumberedStep(number=i, step=step)
        for i, step in enumerate(route, start=1)
        if floor is None or step_floor(step) == floor
    ]


def build_route_view(
    graph: LibraryGraph,
    destination_id: str,
    start_id: Optional[str] = None,
    floor: Optional[int] = None
) -> RouteResponse:
    """
    Select a destination and describe its route for the floor being viewed.

    Raises:
        HTTPException: 404 for an unknown destination or a missing route
    """
    start_id = start_id or settings.kiosk_node_id

    state = SessionState(current_floor=settings.default_floor)
    try:
        state = select_destination(state, graph, destination_id, start_id)
    except DestinationNotFoundError:
        raise HTTPException(status_code=404, detail=f"Destination '{destination_id}' not found")

    if not state.has_route:
        raise HTTPException(
            status_code=404,
            detail=f"No route from '{start_id}' to '{destination_id}'"
        )

    if floor is not None:
        state = switch_floor(state, floor)

    dest = state.selected_destination
    route = list(state.current_route)
    start_node = find_node(graph, start_id)
    start_node_floor = start_node.floor if start_node is not None else settings.default_floor

    logger.info(
        "Route selected",
        start_id=start_id,
        destination_id=dest.id,
        total_steps=len(route),
        current_floor=state.current_floor
    )

    return RouteResponse(
        title=f"Directions to {dest.name}",
        description=f"From Kiosk to {dest.name} (Floor {dest.floor})",
        start_id=start_id,
        destination=to_destination(dest),
        current_floor=state.current_floor,
        steps=_number_steps(route),
        floor_steps=_number_steps(route, state.current_floor),
        highlight_path_ids=highlight_path_ids(route, state.current_floor),
        start_marker_id=start_id,
        end_marker_id=end_marker_id(dest),
        show_start_marker=start_node_floor == state.current_floor,
        show_end_marker=dest.floor == state.current_floor,
        handoff_url=handoff_url(settings.public_base_url, dest.id)
    )


@router.get(
    "/routes/{destination_id}",
    response_model=RouteResponse,
    summary="Get route",
    description="Get the precomputed route to a destination with per-floor highlight data"
)
async def get_route(
    destination_id: str = Path(..., description="Destination node id"),
    start: Optional[str] = Query(None, description="Start node id (defaults to the kiosk)"),
    floor: Optional[int] = Query(None, description="Floor currently shown on the map")
) -> RouteResponse:
    graph = require_graph()
    return build_route_view(graph, destination_id, start, floor)


@router.post(
    "/routes",
    response_model=RouteResponse,
    summary="Get route with request body",
    description="Get a route view using a structured request body"
)
async def get_route_with_body(request: RouteRequest) -> RouteResponse:
    graph = require_graph()
    return build_route_view(graph, request.destination_id, request.start_id, request.floor)


@router.get(
    "/handoff",
    response_model=RouteResponse,
    summary="Resolve mobile hand-off",
    description="Open the route encoded in a kiosk QR code (?dest=ID or legacy ?start=X&end=Y)"
)
async def resolve_mobile_handoff(
    dest: Optional[str] = Query(None, description="Destination node id"),
    start: Optional[str] = Query(None, description="Legacy start node id"),
    end: Optional[str] = Query(None, description="Legacy destination node id")
) -> RouteResponse:
    """
    Resolve a hand-off link scanned on a phone.

    The route always starts at the kiosk; the legacy start id only marks the
    link format.
    """
    graph = require_graph()
    destination_id = resolve_handoff(dest, start, end)
    if destination_id is None:
        raise HTTPException(status_code=400, detail="Hand-off link has no destination")

    logger.info("Mobile hand-off", destination_id=destination_id, legacy=dest is None)
    return build_route_view(graph, destination_id)
