"""Request models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(..., min_length=1, max_length=100, description="Search query")
    limit: Optional[int] = Field(
        None, ge=1, le=100, description="Maximum number of results to return"
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Reject blank queries."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v


class SuggestionRequest(BaseModel):
    """Request model for autocomplete suggestions."""

    query: str = Field(..., min_length=1, max_length=100, description="Partial query")
    limit: Optional[int] = Field(
        None, ge=1, le=20, description="Maximum number of suggestions"
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Reject blank queries."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v
