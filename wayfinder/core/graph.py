"""Building graph loading, storage and route lookup."""

import json
from typing import List, Optional, Sequence

import structlog
from pydantic import ValidationError

from ..models.graph import DestinationNode, LibraryGraph, RouteStep

logger = structlog.get_logger(__name__)


class GraphLoadError(Exception):
    """Raised when the building graph cannot be read or fails validation."""


def load_graph(path: str) -> LibraryGraph:
    """
    Load and validate a building graph from a JSON file.

    Args:
        path: Path to the graph JSON file

    Returns:
        Validated, read-only graph

    Raises:
        GraphLoadError: File missing or unreadable, malformed JSON, or schema violation
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise GraphLoadError(f"Cannot read graph file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise GraphLoadError(f"Malformed graph JSON in {path}: {e}") from e

    return parse_graph(data)


def parse_graph(data: dict) -> LibraryGraph:
    """
    Validate already-decoded graph data.

    Raises:
        GraphLoadError: Schema violation (missing name, duplicate id, ...)
    """
    try:
        return LibraryGraph.model_validate(data)
    except ValidationError as e:
        raise GraphLoadError(f"Invalid graph data: {e}") from e


class GraphStore:
    """Holds the single read-only graph of the running service."""

    def __init__(self) -> None:
        self._graph: Optional[LibraryGraph] = None
        self._source: Optional[str] = None

    @property
    def graph(self) -> Optional[LibraryGraph]:
        return self._graph

    @property
    def source(self) -> Optional[str]:
        return self._source

    def is_loaded(self) -> bool:
        return self._graph is not None

    @property
    def nodes(self) -> List[DestinationNode]:
        """Graph nodes, empty before the graph is loaded."""
        if self._graph is None:
            return []
        return self._graph.nodes

    def load(self, path: str) -> LibraryGraph:
        """Load the graph from ``path`` and make it current."""
        graph = load_graph(path)
        self.set_graph(graph, source=path)
        return graph

    def set_graph(self, graph: LibraryGraph, source: Optional[str] = None) -> None:
        self._graph = graph
        self._source = source
        logger.info(
            "Building graph loaded",
            source=source,
            total_nodes=len(graph.nodes),
            total_destinations=sum(1 for node in graph.nodes if node.is_destination),
            total_paths=len(graph.paths),
        )

    def clear(self) -> None:
        self._graph = None
        self._source = None


def find_node(graph: Optional[LibraryGraph], node_id: str) -> Optional[DestinationNode]:
    """Find a node by id."""
    if graph is None:
        return None
    return next((node for node in graph.nodes if node.id == node_id), None)


def route_key(start_id: str, end_id: str) -> str:
    return f"{start_id}-{end_id}"


def lookup_route(
    graph: Optional[LibraryGraph], start_id: str, end_id: str
) -> Optional[List[RouteStep]]:
    """
    Look up the precomputed route between two nodes.

    Returns:
        Route steps, or None when no path is stored for the pair
    """
    if graph is None:
        return None
    return graph.paths.get(route_key(start_id, end_id))


def step_floor(step: RouteStep) -> int:
    """Floor a step is drawn on; a floor change is drawn where it starts."""
    return step.floor


def steps_on_floor(route: Sequence[RouteStep], floor: int) -> List[RouteStep]:
    """Steps of a route that are drawn on ``floor``."""
    return [step for step in route if step_floor(step) == floor]


def highlight_path_ids(route: Sequence[RouteStep], floor: int) -> List[str]:
    """Floor-plan path element ids to highlight on ``floor``."""
    return [step.path_id for step in steps_on_floor(route, floor) if step.path_id]


def end_marker_id(node: DestinationNode) -> str:
    """
    Marker element id for a destination on the floor plan.

    Node ids follow ``F<floor>_<area...>``; the marker is
    ``F<floor>_<area...>_DEST`` using the node's own floor number.
    """
    area = "_".join(node.id.split("_")[1:])
    return f"F{node.floor}_{area}_DEST"


def handoff_url(base_url: str, node_id: str) -> str:
    """URL opening the same destination on a phone (QR code payload)."""
    return f"{base_url}?dest={node_id}"


def resolve_handoff(
    dest: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None
) -> Optional[str]:
    """
    Resolve hand-off link parameters to a destination id.

    ``?dest=ID`` is the current format; ``?start=X&end=Y`` is the legacy one
    and resolves to ``Y``.
    """
    if dest:
        return dest
    if start and end:
        return end
    return None
