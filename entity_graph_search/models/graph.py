"""Graph data models shared by the engine, the loader and the API."""

from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Only string values take part in indexing and scoring; anything else is carried as-is
AttributeValue = Union[str, bool, int, float, datetime, date, List[Any], Dict[str, Any], None]


class Node(BaseModel):
    """A single entity in the graph."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique, stable node identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Free-text description")
    attributes: Dict[str, AttributeValue] = Field(
        default_factory=dict, description="Synthetic attributes keyed by attribute name"
    )
    level: Optional[int] = Field(None, ge=0, description="Depth in the hierarchy")
    parent_id: Optional[str] = Field(None, description="Identifier of the parent node")
    x: Optional[float] = Field(None, description="Layout x coordinate")
    y: Optional[float] = Field(None, description="Layout y coordinate")

    def string_attributes(self) -> List[str]:
        """Return the attribute values that are strings, in attribute order."""
        return [value for value in self.attributes.values() if isinstance(value, str)]


class Edge(BaseModel):
    """A connection between two nodes."""

    id: str = Field(..., description="Edge identifier")
    source: str = Field(..., description="Source node identifier")
    target: str = Field(..., description="Target node identifier")
    label: Optional[str] = Field(None, description="Optional edge label")
    weight: Optional[float] = Field(None, description="Edge weight")
    type: Literal["single", "double", "weighted"] = Field(
        default="single", description="Edge rendering type"
    )


class GraphData(BaseModel):
    """A complete graph snapshot."""

    nodes: List[Node] = Field(default_factory=list, description="Graph nodes")
    edges: List[Edge] = Field(default_factory=list, description="Graph edges")
