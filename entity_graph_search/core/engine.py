"""Main search engine implementation."""

import time
from typing import Any, Dict, List, Optional, Sequence

import structlog

from ..models.graph import Node
from ..models.response import SearchResult
from .index import InvertedIndex
from .scorer import NodeScorer
from .tokenizer import Tokenizer

logger = structlog.get_logger(__name__)


class SearchEngine:
    """Search engine over a snapshot of graph nodes.

    The engine holds exactly one node snapshot and the index derived from
    it. ``update_nodes`` is the only mutator and swaps both wholesale; it
    must not be called while a ``search`` or ``get_suggestions`` call is in
    flight on another thread.
    """

    def __init__(
        self,
        nodes: Optional[Sequence[Node]] = None,
        default_limit: int = 10,
        default_suggestion_limit: int = 5
    ) -> None:
        """
        Initialize the search engine and index the initial snapshot.

        Args:
            nodes: Initial node collection (empty if None)
            default_limit: Result limit used when ``search`` gets none
            default_suggestion_limit: Limit used when ``get_suggestions`` gets none
        """
        self.default_limit = default_limit
        self.default_suggestion_limit = default_suggestion_limit
        self.tokenizer = Tokenizer()
        self.scorer = NodeScorer(self.tokenizer)

        self._nodes: List[Node] = []
        self._nodes_by_id: Dict[str, Node] = {}
        self.index = InvertedIndex(self.tokenizer)

        self._stats = self._empty_stats()
        self.update_nodes(nodes or [])

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "empty_queries": 0,
            "no_matches": 0,
            "total_execution_time": 0.0,
            "total_rebuilds": 0,
            "last_rebuild_time_ms": 0.0,
            "last_rebuild_at": None
        }

    @property
    def nodes(self) -> List[Node]:
        """The current snapshot."""
        return list(self._nodes)

    def update_nodes(self, nodes: Sequence[Node]) -> None:
        """
        Replace the node snapshot and rebuild the index from scratch.

        Args:
            nodes: New node collection
        """
        start_time = time.time()

        snapshot = list(nodes)
        index = InvertedIndex(self.tokenizer)
        index.build(snapshot)

        nodes_by_id: Dict[str, Node] = {}
        for node in snapshot:
            nodes_by_id.setdefault(node.id, node)

        self._nodes = snapshot
        self._nodes_by_id = nodes_by_id
        self.index = index

        execution_time = (time.time() - start_time) * 1000
        self._stats["total_rebuilds"] += 1
        self._stats["last_rebuild_time_ms"] = execution_time
        self._stats["last_rebuild_at"] = time.time()

        logger.info(
            "Search index rebuilt",
            node_count=len(snapshot),
            term_count=len(index),
            duration_ms=round(execution_time, 2)
        )

    def search(self, query: str, limit: Optional[int] = None) -> List[SearchResult]:
        """
        Search the snapshot for nodes matching a free-text query.

        Results are ordered by score, highest first. Equal scores keep the
        order in which candidates were gathered: query term order, then the
        order terms were first indexed, then snapshot order.

        Args:
            query: Search query
            limit: Maximum number of results (engine default if None)

        Returns:
            Ranked list of SearchResult objects, every score > 0
        """
        start_time = time.time()
        limit = self.default_limit if limit is None else limit

        self._stats["total_queries"] += 1

        # Blank queries and non-positive limits are answered without touching the index
        if not query or not query.strip() or limit <= 0:
            self._stats["empty_queries"] += 1
            return []

        query_terms = self.tokenizer.tokenize(query)

        results = []
        for slot in self._gather_candidates(query_terms):
            node = self._nodes[slot]
            score = self.scorer.score_terms(node, query_terms)
            if score > 0:
                results.append(SearchResult(node=node, score=score))

        results.sort(key=lambda result: result.score, reverse=True)
        results = results[:limit]

        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time
        if not results:
            self._stats["no_matches"] += 1

        logger.debug(
            "Search completed",
            query=query,
            total_results=len(results),
            execution_time_ms=round(execution_time, 3)
        )

        return results

    def _gather_candidates(self, query_terms: Sequence[str]) -> List[int]:
        """
        Collect candidate snapshot slots through the index.

        Args:
            query_terms: Tokenized query

        Returns:
            Deduplicated slots in first-gathered order
        """
        candidates: Dict[int, None] = {}

        for query_term in query_terms:
            for index_term in self.index.matching_terms(query_term):
                for slot in self.index.get_slots(index_term):
                    candidates.setdefault(slot, None)

        return list(candidates)

    def get_suggestions(self, query: str, limit: Optional[int] = None) -> List[str]:
        """
        Get autocomplete suggestions for a partial query.

        Names containing the query come first in snapshot order. They are
        followed by names reached through longer index terms that contain
        the query. Suggestions are not ranked.

        Args:
            query: Partial query
            limit: Maximum number of suggestions (engine default if None)

        Returns:
            Distinct node names
        """
        limit = self.default_suggestion_limit if limit is None else limit

        if not query or not query.strip() or limit <= 0:
            return []

        query_lower = query.lower()
        suggestions: Dict[str, None] = {}

        for node in self._nodes:
            if query_lower in node.name.lower():
                suggestions.setdefault(node.name, None)

        for term, nodes in self.index.items():
            if query_lower in term and len(term) > len(query_lower):
                for node in nodes:
                    if term in node.name.lower():
                        suggestions.setdefault(node.name, None)

        return list(suggestions)[:limit]

    def get_node_by_id(self, node_id: str) -> Optional[Node]:
        """
        Resolve a node by its identifier.

        Args:
            node_id: Node identifier

        Returns:
            The first node with that identifier, or None if not found
        """
        return self._nodes_by_id.get(node_id)

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        answered = stats["total_queries"] - stats["empty_queries"]
        if answered > 0:
            stats["average_execution_time_ms"] = stats["total_execution_time"] / answered
            stats["no_match_rate"] = stats["no_matches"] / answered
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["no_match_rate"] = 0.0

        stats["index_stats"] = self.index.get_stats()

        return stats

    def clear(self) -> None:
        """Drop the snapshot and reset statistics."""
        self._nodes = []
        self._nodes_by_id = {}
        self.index = InvertedIndex(self.tokenizer)
        self._stats = self._empty_stats()
