"""List tags use case."""

import logfire
from pydantic import BaseModel, Field

from relate.application.usecase.tag.common import TagItem
from relate.domain.service import TagService
from relate.domain.value import TagOrder


class ListTagsRequest(BaseModel):
    """List tags request."""

    limit: int | None = Field(default=None, ge=1)
    order_by: TagOrder = TagOrder.NAME


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing stored tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Stored tags with their relations
        """
        with logfire.span(
            "list_tags.execute",
            limit=request.limit,
            order_by=request.order_by,
        ):
            tags = await self.tag_service.get_all_tags(
                limit=request.limit,
                order_by=request.order_by,
            )

            tag_items = [TagItem.from_tag(tag) for tag in tags]

            logfire.info("Tags listed", count=len(tag_items))

            return ListTagsResponse(tags=tag_items)
