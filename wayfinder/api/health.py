"""Health check and monitoring API endpoints."""

import time

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global instances
from ..engine_instance import graph_store, ranking_engine

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the wayfinder service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the wayfinder service.

    Reports the building graph and the ranking engine separately; a service
    without a graph is degraded, a failing engine makes it unhealthy.
    """
    try:
        uptime = time.time() - app_start_time

        dependencies = {
            "building_graph": "healthy" if graph_store.is_loaded() else "degraded",
            "ranking_engine": "healthy",
        }

        # Test basic functionality
        try:
            ranking_engine.rank("test", graph_store.nodes, max_results=1)
        except Exception:
            dependencies["ranking_engine"] = "unhealthy"

        # Determine overall status
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"

        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check whether the building graph is loaded and searches can be served"
)
async def readiness_check() -> JSONResponse:
    if not graph_store.is_loaded():
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "Building graph not loaded"}
        )

    graph = graph_store.graph
    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "total_nodes": len(graph.nodes),
            "total_paths": len(graph.paths),
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check whether the process is alive"
)
async def liveness_check() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={"status": "alive", "uptime": time.time() - app_start_time}
    )
