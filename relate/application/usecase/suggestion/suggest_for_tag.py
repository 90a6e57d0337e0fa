"""Suggest tags for a tag use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from relate.application.usecase.tag.common import TagItem
from relate.domain.service import SuggestionService, TagService
from relate.domain.value import TagId


class SuggestForTagRequest(BaseModel):
    """Suggest for tag request."""

    tag_id: str  # UUID string


class SuggestForTagResponse(BaseModel):
    """Suggest for tag response."""

    tag_id: str
    tags: list[TagItem]


class SuggestForTagUseCase:
    """Use case for finding tags that share vocabulary with a stored tag."""

    def __init__(
        self, tag_service: TagService, suggestion_service: SuggestionService
    ) -> None:
        """Initialize suggest for tag use case.

        Args:
            tag_service: Tag domain service
            suggestion_service: Suggestion domain service
        """
        self.tag_service = tag_service
        self.suggestion_service = suggestion_service

    async def execute(self, request: SuggestForTagRequest) -> SuggestForTagResponse:
        """Execute suggest for tag flow.

        Raises:
            ValueError: If tag_id is not a UUID
            NotFoundError: If the tag does not exist
        """
        tag_id = TagId(UUID(request.tag_id))
        with logfire.span("suggest_for_tag.execute", tag_id=str(tag_id)):
            tag = await self.tag_service.get_tag(tag_id)
            suggestions = await self.suggestion_service.suggest_for_tag(tag)
            return SuggestForTagResponse(
                tag_id=str(tag_id),
                tags=[TagItem.from_tag(s) for s in suggestions],
            )
