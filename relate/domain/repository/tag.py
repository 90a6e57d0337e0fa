"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from relate.domain.model.tag import Tag
from relate.domain.value import TagId, TagOrder


class TagRepository(ABC):
    """Repository interface for the Tag store."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or replace a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID.

        Args:
            tag_ids: Tag identifiers

        Returns:
            Found tags in request order (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def find_all(
        self, limit: int | None = None, order_by: TagOrder = TagOrder.NAME
    ) -> list[Tag]:
        """Find all tags.

        Args:
            limit: Maximum number of tags to return, None for all
            order_by: Field to order by

        Returns:
            List of tags
        """
        pass

    @abstractmethod
    async def delete(self, tag_id: TagId) -> None:
        """Delete a tag.

        Args:
            tag_id: Tag identifier
        """
        pass
