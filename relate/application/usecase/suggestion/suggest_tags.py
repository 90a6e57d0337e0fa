"""Suggest tags for a word use case."""

import logfire
from pydantic import BaseModel, Field

from relate.application.usecase.tag.common import TagItem
from relate.domain.service import SuggestionService


class SuggestTagsRequest(BaseModel):
    """Suggest tags request."""

    word: str = Field(max_length=200)


class SuggestTagsResponse(BaseModel):
    """Suggest tags response."""

    word: str
    tags: list[TagItem]


class SuggestTagsUseCase:
    """Use case for finding the tags that mention a word."""

    def __init__(self, suggestion_service: SuggestionService) -> None:
        """Initialize suggest tags use case.

        Args:
            suggestion_service: Suggestion domain service
        """
        self.suggestion_service = suggestion_service

    async def execute(self, request: SuggestTagsRequest) -> SuggestTagsResponse:
        """Execute suggest tags flow.

        Args:
            request: Suggest tags request

        Returns:
            Tags whose name or description contains the word
        """
        tags = await self.suggestion_service.suggest(request.word)
        logfire.info("Tags suggested for word", word=request.word, count=len(tags))
        return SuggestTagsResponse(
            word=request.word,
            tags=[TagItem.from_tag(tag) for tag in tags],
        )
