"""Field-weighted substring scoring of nodes against a query."""

from typing import Dict, List, Optional, Sequence, Tuple

from ..models.graph import Node
from .tokenizer import Tokenizer

# (exact, partial) weight per field group
FIELD_WEIGHTS: Dict[str, Tuple[float, float]] = {
    "name": (10.0, 5.0),
    "description": (3.0, 1.0),
    "attribute": (2.0, 0.5),
}


def terms_overlap(query_term: str, field_term: str) -> bool:
    """Return True when either term contains the other."""
    return query_term in field_term or field_term in query_term


class NodeScorer:
    """Scores a node by summing weighted query/field term overlaps.

    Every (query term, field term) pair that overlaps adds the exact weight
    of its field group when the terms are equal and the partial weight
    otherwise. Matches are summed with no early exit and no cap, so a node
    whose text repeats a query term scores once per repetition.
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None) -> None:
        """
        Initialize the scorer.

        Args:
            tokenizer: Tokenizer used for queries and fields (a new one if None)
        """
        self.tokenizer = tokenizer or Tokenizer()

    def score(self, node: Node, query: str) -> float:
        """
        Score a node against a raw query string.

        Args:
            node: Candidate node
            query: Query text

        Returns:
            Non-negative relevance score
        """
        return self.score_terms(node, self.tokenizer.tokenize(query))

    def score_terms(self, node: Node, query_terms: Sequence[str]) -> float:
        """
        Score a node against already tokenized query terms.

        Args:
            node: Candidate node
            query_terms: Tokenized query

        Returns:
            Non-negative relevance score
        """
        if not query_terms:
            return 0.0

        score = self._score_field(
            query_terms, self.tokenizer.tokenize(node.name), FIELD_WEIGHTS["name"]
        )
        score += self._score_field(
            query_terms, self.tokenizer.tokenize(node.description), FIELD_WEIGHTS["description"]
        )
        for value in node.string_attributes():
            score += self._score_field(
                query_terms, self.tokenizer.tokenize(value), FIELD_WEIGHTS["attribute"]
            )

        return score

    def _score_field(
        self,
        query_terms: Sequence[str],
        field_terms: List[str],
        weights: Tuple[float, float]
    ) -> float:
        """Sum the weights of every overlapping (query term, field term) pair."""
        exact_weight, partial_weight = weights
        score = 0.0

        for query_term in query_terms:
            for field_term in field_terms:
                if terms_overlap(query_term, field_term):
                    score += exact_weight if field_term == query_term else partial_weight

        return score
