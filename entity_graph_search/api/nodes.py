"""Node lookup and snapshot replacement endpoints."""

import structlog
from fastapi import APIRouter, HTTPException, Path

from ..data.loader import GraphDataError, validate_graph_data
from ..models.graph import GraphData, Node
from ..models.response import SnapshotResponse

router = APIRouter(prefix="/api/v1", tags=["nodes"])
logger = structlog.get_logger(__name__)

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/nodes/{node_id}",
    response_model=Node,
    summary="Get node by id",
    description="Resolve a node identifier to the full node"
)
async def get_node(
    node_id: str = Path(..., description="The node identifier")
) -> Node:
    """Resolve a selected node back to its full record."""
    node = search_engine.get_node_by_id(node_id)
    if node is None:
        raise HTTPException(
            status_code=404,
            detail=f"Node '{node_id}' not found"
        )
    return node


@router.put(
    "/nodes",
    response_model=SnapshotResponse,
    summary="Replace the node snapshot",
    description="Replace every indexed node and rebuild the search index"
)
async def replace_nodes(graph: GraphData) -> SnapshotResponse:
    """
    Replace the node snapshot.

    The graph is validated before the engine is touched, so an invalid
    payload leaves the current snapshot in place.
    """
    try:
        validate_graph_data(graph)
    except GraphDataError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        search_engine.update_nodes(graph.nodes)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to replace nodes: {str(e)}"
        )

    logger.info(
        "Node snapshot replaced",
        total_nodes=len(graph.nodes),
        total_edges=len(graph.edges)
    )

    return SnapshotResponse(
        message="Nodes replaced successfully",
        total_nodes=len(graph.nodes),
        total_edges=len(graph.edges),
        total_terms=len(search_engine.index)
    )
