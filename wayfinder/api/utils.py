"""Helpers shared by the API routers."""

from fastapi import HTTPException

from ..config import get_settings
from ..core.engine import highlight
from ..engine_instance import graph_store
from ..models.graph import DestinationNode, LibraryGraph
from ..models.response import DestinationResponse, SuggestionResult

settings = get_settings()


def require_graph() -> LibraryGraph:
    """Return the loaded graph or fail with 503."""
    graph = graph_store.graph
    if graph is None:
        raise HTTPException(status_code=503, detail="Building graph not loaded")
    return graph


def to_suggestion(node: DestinationNode, score: int, raw_query: str) -> SuggestionResult:
    return SuggestionResult(
        id=node.id,
        name=node.name,
        floor=node.floor,
        score=score,
        highlighted_name=highlight(
            node.name,
            raw_query,
            settings.highlight_open_tag,
            settings.highlight_close_tag,
        ),
    )


def to_destination(node: DestinationNode) -> DestinationResponse:
    return DestinationResponse(
        id=node.id,
        name=node.name,
        floor=node.floor,
        search_keywords=list(node.search_keywords or ()),
    )
