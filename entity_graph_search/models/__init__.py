"""Data models for the entity graph search service."""

from .graph import AttributeValue, Edge, GraphData, Node
from .response import (
    SearchResult,
    SearchResponse,
    SnapshotResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import SearchRequest, SuggestionRequest

__all__ = [
    "AttributeValue",
    "Edge",
    "GraphData",
    "Node",
    "SearchResult",
    "SearchResponse",
    "SnapshotResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "SearchRequest",
    "SuggestionRequest",
]
