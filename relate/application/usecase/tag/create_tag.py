"""Create tag use case."""

import logfire
from pydantic import BaseModel, Field

from relate.application.usecase.tag.common import TagItem
from relate.domain.service import TagService


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: str = Field(max_length=200)
    description: str = Field(default="", max_length=2000)


class CreateTagResponse(BaseModel):
    """Create tag response."""

    tag: TagItem


class CreateTagUseCase:
    """Use case for creating a tag and indexing it."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow.

        Args:
            request: Create tag request

        Returns:
            The stored tag, relations already computed
        """
        with logfire.span("create_tag.execute", tag_name=request.name):
            tag = self.tag_service.create_tag(request.name, request.description)
            stored = await self.tag_service.add_tag(tag)
            return CreateTagResponse(tag=TagItem.from_tag(stored))
