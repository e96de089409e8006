"""Search API endpoints."""

import time
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Path

from ..models.response import SearchResponse
from ..models.request import SearchRequest, SuggestionRequest
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


def _check_query_length(query: str) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


def _run_search(query: str, limit: Optional[int]) -> SearchResponse:
    start_time = time.time()
    results = search_engine.search(query, limit=limit or settings.default_search_limit)
    execution_time = (time.time() - start_time) * 1000

    return SearchResponse(
        query=query,
        execution_time_ms=execution_time,
        total_results=len(results),
        results=results
    )


@router.get(
    "/search/{query}",
    response_model=SearchResponse,
    summary="Search nodes",
    description="Rank graph nodes against a free-text query"
)
async def search_nodes(
    query: str = Path(..., description="Free-text query", min_length=1),
    limit: Optional[int] = Query(
        None,
        ge=1,
        le=settings.max_search_limit,
        description="Maximum number of results to return"
    )
) -> SearchResponse:
    """
    Search the current snapshot.

    Results carry the full node and its relevance score, best first.
    """
    _check_query_length(query)

    try:
        return _run_search(query, limit)

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search graph nodes using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """Search the current snapshot using a JSON request body."""
    _check_query_length(request.query)

    try:
        return _run_search(request.query, request.limit)

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.get(
    "/suggestions/{query}",
    response_model=list[str],
    summary="Get autocomplete suggestions",
    description="Get node names completing a partial query"
)
async def get_suggestions(
    query: str = Path(..., description="The partial query", min_length=1),
    limit: Optional[int] = Query(None, ge=1, le=20, description="Maximum number of suggestions")
) -> list[str]:
    """
    Get autocomplete suggestions for a partial query.

    Suggestions are distinct node names in snapshot order.
    """
    _check_query_length(query)

    try:
        return search_engine.get_suggestions(
            query, limit=limit or settings.default_suggestion_limit
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get suggestions: {str(e)}"
        )


@router.post(
    "/suggestions",
    response_model=list[str],
    summary="Suggestions with request body",
    description="Get autocomplete suggestions using a structured request body"
)
async def get_suggestions_with_body(request: SuggestionRequest) -> list[str]:
    """Get autocomplete suggestions using a JSON request body."""
    try:
        return search_engine.get_suggestions(
            request.query, limit=request.limit or settings.default_suggestion_limit
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get suggestions: {str(e)}"
        )


@router.get(
    "/terms",
    response_model=list[str],
    summary="Get all indexed terms",
    description="Get a list of all terms currently in the inverted index"
)
async def get_all_terms() -> list[str]:
    """
    Get all terms currently in the inverted index.

    Useful for debugging tokenization of the loaded snapshot.
    """
    try:
        return sorted(search_engine.index.terms())

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get terms: {str(e)}"
        )
