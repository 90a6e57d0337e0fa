"""Suggestion query domain service."""

import logfire

from relate.domain.model.tag import Tag
from relate.domain.value import TagId

from .base import Service
from .suggestion_index import SuggestionIndex
from .tag_service import TagService
from .tokenizer import Tokenizer


class SuggestionService(Service):
    """Answers "which tags mention a word" and "which tags relate to a tag"."""

    def __init__(
        self,
        tag_service: TagService,
        suggestion_index: SuggestionIndex,
        tokenizer: Tokenizer,
    ) -> None:
        """Initialize suggestion service.

        Args:
            tag_service: Tag domain service
            suggestion_index: Suggestion index
            tokenizer: Tokenizer used for decomposition
        """
        self.tag_service = tag_service
        self.suggestion_index = suggestion_index
        self.tokenizer = tokenizer

    async def suggest(self, word: str) -> list[Tag]:
        """Get the tags whose decomposition contains a word.

        IDs left in the index by a removed tag are dropped from the result
        and reported as a warning.

        Args:
            word: Word to look up (normalized before lookup)

        Returns:
            Matching tags ordered by name, empty if the word is not indexed
        """
        token = self.tokenizer.normalize(word)
        with logfire.span("suggestion_service.suggest", word=token):
            tag_ids = await self.suggestion_index.lookup(token)
            if not tag_ids:
                return []

            tags: list[Tag] = []
            stale: list[TagId] = []
            for tag_id in tag_ids:
                tag = await self.tag_service.find_tag(tag_id)
                if tag is None:
                    stale.append(tag_id)
                else:
                    tags.append(tag)

            if stale:
                logfire.warn(
                    "Stale tag IDs in suggestion index",
                    word=token,
                    tag_ids=sorted(str(i) for i in stale),
                )

            tags.sort(key=lambda t: (t.name.lower(), str(t.id)))
            return tags

    async def suggest_for_tag(self, tag: Tag) -> list[Tag]:
        """Get the other tags sharing any token with a tag.

        Args:
            tag: Tag to find suggestions for

        Returns:
            De-duplicated tags, never including tag itself
        """
        with logfire.span("suggestion_service.suggest_for_tag", tag_id=str(tag.id)):
            seen: dict[TagId, Tag] = {}
            for token in sorted(self.tokenizer.decompose(tag)):
                for suggestion in await self.suggest(token):
                    if suggestion.id != tag.id:
                        seen.setdefault(suggestion.id, suggestion)

            logfire.info("Suggestions for tag", tag_id=str(tag.id), count=len(seen))
            return list(seen.values())

    async def get_all_suggestions(self) -> dict[str, frozenset[TagId]]:
        """Get every suggestion index entry."""
        return await self.suggestion_index.entries()
