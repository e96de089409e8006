"""Inverted index mapping terms to the nodes that contain them."""

import time
from collections import defaultdict
from typing import Any, Dict, Iterator, List, Optional, Sequence

from ..models.graph import Node
from .tokenizer import Tokenizer


class InvertedIndex:
    """Inverted index from term to an ordered, deduplicated set of nodes.

    Postings are keyed by the node's slot in the indexed snapshot, so a node
    is stored at most once per term and two distinct nodes that happen to be
    equal by value are still kept apart.
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None) -> None:
        """
        Initialize an empty index.

        Args:
            tokenizer: Tokenizer used to extract terms (a new one if None)
        """
        self.tokenizer = tokenizer or Tokenizer()
        self._index: Dict[str, Dict[int, Node]] = {}
        self._stats = {
            "total_terms": 0,
            "total_postings": 0,
            "total_nodes": 0,
            "last_built": None
        }

    def build(self, nodes: Sequence[Node]) -> None:
        """
        Build the index from a node snapshot, replacing any prior contents.

        Args:
            nodes: Ordered node collection to index
        """
        index: Dict[str, Dict[int, Node]] = defaultdict(dict)

        for slot, node in enumerate(nodes):
            for term in self._node_terms(node):
                index[term].setdefault(slot, node)

        self._index = dict(index)
        self._stats = {
            "total_terms": len(self._index),
            "total_postings": sum(len(postings) for postings in self._index.values()),
            "total_nodes": len(nodes),
            "last_built": time.time()
        }

    def _node_terms(self, node: Node) -> Iterator[str]:
        """Yield every term of the node's name, description and string attributes."""
        yield from self.tokenizer.tokenize(node.name)
        yield from self.tokenizer.tokenize(node.description)
        for value in node.string_attributes():
            yield from self.tokenizer.tokenize(value)

    def get_nodes(self, term: str) -> List[Node]:
        """
        Get the nodes posted under a term.

        Args:
            term: The term to look up

        Returns:
            Nodes in snapshot order, empty if the term is unknown
        """
        postings = self._index.get(term)
        if postings is None:
            return []
        return list(postings.values())

    def get_slots(self, term: str) -> List[int]:
        """Get the snapshot positions of the nodes posted under a term."""
        return list(self._index.get(term, {}).keys())

    def matching_terms(self, term: str) -> List[str]:
        """
        Get every index term that contains or is contained by a term.

        Args:
            term: Query term

        Returns:
            Matching index terms in first-seen order
        """
        return [
            index_term for index_term in self._index
            if term in index_term or index_term in term
        ]

    def items(self) -> Iterator[tuple]:
        """Iterate over (term, nodes) pairs in first-seen term order."""
        for term, postings in self._index.items():
            yield term, list(postings.values())

    def terms(self) -> List[str]:
        """Get all terms in the index."""
        return list(self._index.keys())

    def clear(self) -> None:
        """Clear all terms."""
        self._index = {}
        self._stats = {
            "total_terms": 0,
            "total_postings": 0,
            "total_nodes": 0,
            "last_built": None
        }

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        return self._stats.copy()

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, term: object) -> bool:
        return term in self._index
