"""Remove tag use case."""

from uuid import UUID

from pydantic import BaseModel

from relate.domain.service import TagService
from relate.domain.value import TagId


class RemoveTagRequest(BaseModel):
    """Remove tag request."""

    tag_id: str  # UUID string


class RemoveTagResponse(BaseModel):
    """Remove tag response."""

    success: bool
    tag_id: str
    name: str


class RemoveTagUseCase:
    """Use case for removing a tag."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize remove tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: RemoveTagRequest) -> RemoveTagResponse:
        """Execute remove tag flow.

        Raises:
            ValueError: If tag_id is not a UUID
            TagRemovalError: If the tag does not exist
        """
        removed = await self.tag_service.remove_tag(TagId(UUID(request.tag_id)))
        return RemoveTagResponse(success=True, tag_id=str(removed.id), name=removed.name)
