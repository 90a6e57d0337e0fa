"""Get tag use case."""

from uuid import UUID

from pydantic import BaseModel

from relate.application.usecase.tag.common import TagItem
from relate.domain.service import TagService
from relate.domain.value import TagId


class GetTagRequest(BaseModel):
    """Get tag request."""

    tag_id: str  # UUID string


class GetTagResponse(BaseModel):
    """Get tag response."""

    tag: TagItem


class GetTagUseCase:
    """Use case for retrieving a tag by ID."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize get tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: GetTagRequest) -> GetTagResponse:
        """Execute get tag flow.

        Raises:
            ValueError: If tag_id is not a UUID
            NotFoundError: If the tag does not exist
        """
        tag = await self.tag_service.get_tag(TagId(UUID(request.tag_id)))
        return GetTagResponse(tag=TagItem.from_tag(tag))
