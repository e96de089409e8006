"""Loading and validation of graph snapshots."""

import json
import os
from typing import Any, List, Optional, Union

import structlog
from pydantic import ValidationError

from ..models.graph import GraphData

logger = structlog.get_logger(__name__)

SAMPLE_GRAPH_PATH = os.path.join(os.path.dirname(__file__), "sample_nodes.json")

# Problems reported in a single error message
MAX_REPORTED_PROBLEMS = 5


class GraphDataError(ValueError):
    """Raised when a graph snapshot cannot be read or fails validation."""

    def __init__(self, message: str, problems: Optional[List[str]] = None) -> None:
        self.problems = problems or []
        super().__init__(message)


def validate_graph_data(graph: GraphData) -> None:
    """
    Check node completeness and edge integrity of a graph snapshot.

    Args:
        graph: Snapshot to validate

    Raises:
        GraphDataError: If any node or edge is invalid
    """
    problems = []
    node_ids = set()

    for position, node in enumerate(graph.nodes):
        if not node.id or not node.name or not node.description:
            problems.append(f"node #{position} ({node.id or '<no id>'}) is missing id, name or description")
        if node.id in node_ids:
            problems.append(f"duplicate node id '{node.id}'")
        node_ids.add(node.id)

    for edge in graph.edges:
        if edge.source not in node_ids or edge.target not in node_ids:
            problems.append(f"edge '{edge.id}' references an unknown node")

    if problems:
        raise GraphDataError(
            f"Invalid graph data: {'; '.join(problems[:MAX_REPORTED_PROBLEMS])}",
            problems
        )


def parse_graph_data(payload: Union[dict, list]) -> GraphData:
    """
    Build a validated snapshot from decoded JSON.

    Args:
        payload: Either a ``{"nodes": [...], "edges": [...]}`` object or a bare node list

    Returns:
        Validated GraphData

    Raises:
        GraphDataError: If the payload does not describe a valid graph
    """
    if isinstance(payload, list):
        payload = {"nodes": payload, "edges": []}

    try:
        graph = GraphData.model_validate(payload)
    except ValidationError as e:
        raise GraphDataError(f"Invalid graph data: {e.error_count()} schema error(s)",
                             [str(error["msg"]) for error in e.errors()]) from e

    validate_graph_data(graph)
    return graph


def load_graph_data(path: str) -> GraphData:
    """
    Read a graph snapshot from a JSON file.

    Args:
        path: Path to a UTF-8 JSON file

    Returns:
        Validated GraphData

    Raises:
        GraphDataError: If the file cannot be read or parsed
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload: Any = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise GraphDataError(f"Cannot read graph data from {path}: {e}") from e

    graph = parse_graph_data(payload)
    logger.info(
        "Graph data loaded",
        path=path,
        total_nodes=len(graph.nodes),
        total_edges=len(graph.edges)
    )
    return graph


def load_sample_graph() -> GraphData:
    """Load the bundled sample graph."""
    return load_graph_data(SAMPLE_GRAPH_PATH)
