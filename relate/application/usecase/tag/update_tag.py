"""Update tag use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from relate.application.usecase.tag.common import TagItem
from relate.domain.service import TagService
from relate.domain.value import TagId


class UpdateTagRequest(BaseModel):
    """Update tag request.

    Fields left as None keep their stored value.
    """

    tag_id: str  # UUID string
    name: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=2000)


class UpdateTagResponse(BaseModel):
    """Update tag response."""

    tag: TagItem


class UpdateTagUseCase:
    """Use case for changing a tag's name or description."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize update tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: UpdateTagRequest) -> UpdateTagResponse:
        """Execute update tag flow.

        Raises:
            ValueError: If tag_id is not a UUID
            TagUpdateError: If the tag does not exist
        """
        tag_id = TagId(UUID(request.tag_id))
        with logfire.span("update_tag.execute", tag_id=str(tag_id)):
            updated = await self.tag_service.edit_tag(
                tag_id, name=request.name, description=request.description
            )
            return UpdateTagResponse(tag=TagItem.from_tag(updated))
