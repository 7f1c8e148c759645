"""Search API endpoints."""

import time
from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, Path, Query

from ..config import get_settings
from ..models.request import SearchRequest
from ..models.response import CategoryResponse, SearchResponse
from .utils import to_suggestion

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()
logger = structlog.get_logger(__name__)

# Import the global instances
from ..engine_instance import graph_store, ranking_engine, suggestion_matcher


def run_search(
    query: str,
    max_results: Optional[int] = None,
    include_suggestions: bool = True
) -> SearchResponse:
    """Rank destinations for a raw query and build the response."""
    start_time = time.time()

    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    nodes = graph_store.nodes
    candidates = ranking_engine.rank_scored(query, nodes, max_results=max_results)
    results = [to_suggestion(c.node, c.score, query) for c in candidates]

    suggestions = None
    if not results and include_suggestions and query.strip():
        names = list(dict.fromkeys(node.name for node in nodes if node.is_destination))
        suggestions = suggestion_matcher.suggest_corrections(query, names)

    execution_time = (time.time() - start_time) * 1000
    logger.debug(
        "Search completed",
        query=query,
        total_results=len(results),
        execution_time_ms=round(execution_time, 3)
    )

    return SearchResponse(
        query=query,
        execution_time_ms=execution_time,
        total_results=len(results),
        results=results,
        suggestions=suggestions
    )


@router.get(
    "/search/{query}",
    response_model=SearchResponse,
    summary="Search destinations",
    description="Rank destinations for a free-text query with typo tolerance"
)
async def search_destinations(
    query: str = Path(..., description="The text typed at the kiosk", min_length=1),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=50,
        description="Maximum number of suggestions to return"
    ),
    include_suggestions: bool = Query(
        True,
        description="Whether to include 'did you mean' names for no-match queries"
    )
) -> SearchResponse:
    """
    Rank destinations matching a query.

    Returns the best destinations with their scores and the matched part of
    each name wrapped in highlight markup.
    """
    try:
        return run_search(query, max_results, include_suggestions)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Rank destinations using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """
    Rank destinations using a structured request body.

    A blank query is accepted and yields an empty result.
    """
    try:
        return run_search(request.query, request.max_results, request.include_suggestions)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.get(
    "/categories",
    response_model=list[str],
    summary="List categories",
    description="Get the category buttons the kiosk offers"
)
async def list_categories() -> list[str]:
    return list(settings.category_keywords)


@router.get(
    "/categories/{category}",
    response_model=CategoryResponse,
    summary="Select a category",
    description="Get the destinations behind a category button"
)
async def select_category(
    category: str = Path(..., description="Category key, e.g. 'restroom'")
) -> CategoryResponse:
    """
    Get destinations for a category tap.

    When exactly one destination matches, its id is returned in
    ``auto_select`` so the kiosk can open the route directly.
    """
    if category not in settings.category_keywords:
        raise HTTPException(status_code=404, detail=f"Unknown category '{category}'")

    matches = ranking_engine.filter_by_category(
        category, graph_store.nodes, settings.category_keywords
    )

    return CategoryResponse(
        category=category,
        total_results=len(matches),
        results=[to_suggestion(node, 0, "") for node in matches],
        auto_select=matches[0].id if len(matches) == 1 else None
    )
