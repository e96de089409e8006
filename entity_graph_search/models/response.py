"""Response models for the engine and API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .graph import Node


class SearchResult(BaseModel):
    """Individual search result."""

    node: Node = Field(..., description="The matched node")
    score: float = Field(..., gt=0.0, description="Relevance score")


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Total number of results")
    results: List[SearchResult] = Field(..., description="Ranked search results")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class SnapshotResponse(BaseModel):
    """Response for snapshot replacement."""

    message: str = Field(..., description="Outcome message")
    total_nodes: int = Field(..., description="Nodes in the new snapshot")
    total_edges: int = Field(..., description="Edges in the new snapshot")
    total_terms: int = Field(..., description="Distinct index terms after the rebuild")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average response time")
    no_match_rate: float = Field(..., description="Share of queries that returned nothing")
    total_nodes: int = Field(..., description="Nodes in the current snapshot")
    total_terms: int = Field(..., description="Distinct index terms")
    memory_usage_mb: float = Field(..., description="Process resident memory in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
