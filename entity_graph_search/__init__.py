"""
Entity Graph Search - in-memory search and autocomplete over entity graph nodes.

This package indexes a snapshot of graph nodes (people, companies, products,
locations) and ranks them against free-text queries using field-weighted
substring matching that also works for CJK text without word boundaries.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .models.graph import Edge, GraphData, Node
from .models.response import SearchResult

__all__ = [
    "SearchEngine",
    "Edge",
    "GraphData",
    "Node",
    "SearchResult",
]
