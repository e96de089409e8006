"""Graph snapshot loading."""

from .loader import (
    GraphDataError,
    load_graph_data,
    load_sample_graph,
    parse_graph_data,
    validate_graph_data,
)

__all__ = [
    "GraphDataError",
    "load_graph_data",
    "load_sample_graph",
    "parse_graph_data",
    "validate_graph_data",
]
