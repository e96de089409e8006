"""Text tokenization utilities for building and querying the search index."""

import re
from typing import List, Optional


class Tokenizer:
    """Splits free text into lower-cased index terms."""

    def __init__(self) -> None:
        """Initialize the tokenizer."""
        # Anything that is not an ASCII word character, whitespace or a CJK ideograph
        self.separator_regex = re.compile(r'[^a-z0-9_\s\u4e00-\u9fff]')
        self.whitespace_regex = re.compile(r'\s+')

    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize text before splitting.

        Args:
            text: Input text to normalize

        Returns:
            Lower-cased text with separators replaced by spaces
        """
        if not text:
            return ""

        return self.separator_regex.sub(' ', text.lower())

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Tokenize text into terms.

        Order is preserved and duplicates are kept.

        Args:
            text: Input text

        Returns:
            List of terms
        """
        if not text:
            return []

        normalized = self.normalize(text)

        return [token for token in self.whitespace_regex.split(normalized) if token]
