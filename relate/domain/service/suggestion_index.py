"""Suggestion index domain service."""

import logfire

from relate.domain.model.tag import Tag
from relate.domain.repository.suggestion import SuggestionRepository
from relate.domain.value import TagId

from .base import Service
from .tokenizer import Tokenizer


class SuggestionIndex(Service):
    """Inverted index from normalized token to the tags that contain it."""

    def __init__(
        self, suggestion_repository: SuggestionRepository, tokenizer: Tokenizer
    ) -> None:
        """Initialize suggestion index.

        Args:
            suggestion_repository: Suggestion repository
            tokenizer: Tokenizer used for decomposition
        """
        self.suggestion_repository = suggestion_repository
        self.tokenizer = tokenizer

    async def index(self, tag: Tag) -> frozenset[str]:
        """Add a tag under every token of its decomposition.

        Args:
            tag: Tag to index

        Returns:
            Tokens the tag was indexed under
        """
        tokens = self.tokenizer.decompose(tag)
        for token in tokens:
            await self.suggestion_repository.add(token, tag.id)
        logfire.info("Suggestions indexed", tag_id=str(tag.id), token_count=len(tokens))
        return tokens

    async def unindex(self, tag: Tag) -> frozenset[str]:
        """Remove a tag from every token of its decomposition.

        Args:
            tag: Tag as it was when indexed

        Returns:
            Tokens the tag was removed from
        """
        tokens = self.tokenizer.decompose(tag)
        for token in tokens:
            await self.suggestion_repository.discard(token, tag.id)
        logfire.info(
            "Suggestions unindexed", tag_id=str(tag.id), token_count=len(tokens)
        )
        return tokens

    async def lookup(self, word: str) -> frozenset[TagId]:
        """Find the tag IDs indexed under a word (normalized first)."""
        return await self.suggestion_repository.find_by_token(
            self.tokenizer.normalize(word)
        )

    async def entries(self) -> dict[str, frozenset[TagId]]:
        """Return the whole index."""
        return await self.suggestion_repository.find_all()
