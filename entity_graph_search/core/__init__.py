"""Core search engine functionality."""

from .engine import SearchEngine
from .index import InvertedIndex
from .scorer import FIELD_WEIGHTS, NodeScorer
from .tokenizer import Tokenizer

__all__ = [
    "SearchEngine",
    "InvertedIndex",
    "FIELD_WEIGHTS",
    "NodeScorer",
    "Tokenizer",
]
