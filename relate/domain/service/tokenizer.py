"""Tag decomposition into normalized tokens."""

import re
from collections.abc import Sequence

from relate.config import DEFAULT_DELIMITERS
from relate.domain.model.tag import Tag

from .base import Service


class Tokenizer(Service):
    """Splits tag text into a normalized token set.

    Tokens are trimmed and lower-cased, so decomposition is
    case-insensitive and indifferent to which delimiter separated words.
    """

    def __init__(self, delimiters: Sequence[str] = DEFAULT_DELIMITERS) -> None:
        """Initialize tokenizer.

        Args:
            delimiters: Strings that separate fragments
        """
        if not delimiters or not all(delimiters):
            raise ValueError("Delimiters must be a non-empty list of non-empty strings")
        self.delimiters = tuple(delimiters)
        # Longest delimiters first
        ordered = sorted(self.delimiters, key=len, reverse=True)
        self._pattern = re.compile("|".join(re.escape(d) for d in ordered))

    @staticmethod
    def normalize(word: str) -> str:
        """Normalize a single word (trim + lower-case)."""
        return word.strip().lower()

    def split(self, text: str) -> frozenset[str]:
        """Split free text into normalized tokens, dropping empty fragments."""
        tokens = (self.normalize(fragment) for fragment in self._pattern.split(text))
        return frozenset(token for token in tokens if token)

    def decompose(self, tag: Tag) -> frozenset[str]:
        """Decompose a tag's name and description into one token set.

        Args:
            tag: Tag to decompose

        Returns:
            Union of the name tokens and the description tokens
        """
        return self.split(tag.name) | self.split(tag.description)
