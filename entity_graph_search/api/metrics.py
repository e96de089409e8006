"""Metrics and monitoring API endpoints."""

import psutil

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query and index metrics for the search engine"
)
async def get_metrics() -> MetricsResponse:
    """
    Get performance metrics for the search engine.

    Memory usage is the resident set size of the service process.
    """
    try:
        stats = search_engine.get_stats()
        index_stats = stats["index_stats"]

        memory_usage_mb = psutil.Process().memory_info().rss / (1024 * 1024)

        return MetricsResponse(
            total_queries=stats["total_queries"],
            average_response_time_ms=stats["average_execution_time_ms"],
            no_match_rate=stats["no_match_rate"],
            total_nodes=index_stats["total_nodes"],
            total_terms=index_stats["total_terms"],
            memory_usage_mb=memory_usage_mb
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )


@router.get(
    "/metrics/index",
    summary="Get index metrics",
    description="Get statistics of the current inverted index"
)
async def get_index_metrics() -> JSONResponse:
    """Get statistics of the current inverted index and its last rebuild."""
    try:
        stats = search_engine.get_stats()

        return JSONResponse(
            status_code=200,
            content={
                "index": stats["index_stats"],
                "total_rebuilds": stats["total_rebuilds"],
                "last_rebuild_time_ms": stats["last_rebuild_time_ms"],
                "last_rebuild_at": stats["last_rebuild_at"]
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get index metrics: {str(e)}"
        )
