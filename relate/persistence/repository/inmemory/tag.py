"""In-memory implementation of Tag repository."""

from copy import deepcopy
from typing import Optional

from relate.domain.model.tag import Tag
from relate.domain.repository.tag import TagRepository
from relate.domain.value import TagId, TagOrder


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository.

    The dict is the single authoritative record; its keys are the set of
    known tag IDs.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}

    async def save(self, tag: Tag) -> Tag:
        """Save or replace a tag."""
        self._tags[tag.id] = deepcopy(tag)
        return deepcopy(tag)

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        tag = self._tags.get(tag_id)
        return deepcopy(tag) if tag else None

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID."""
        return [deepcopy(self._tags[i]) for i in tag_ids if i in self._tags]

    async def find_all(
        self, limit: int | None = None, order_by: TagOrder = TagOrder.NAME
    ) -> list[Tag]:
        """Find all tags."""
        tags = list(self._tags.values())

        # Sort by requested field
        if order_by == TagOrder.CREATED_AT:
            tags.sort(key=lambda t: t.created_at, reverse=True)
        else:
            tags.sort(key=lambda t: (t.name.lower(), str(t.id)))

        if limit is not None:
            tags = tags[:limit]
        return [deepcopy(tag) for tag in tags]

    async def delete(self, tag_id: TagId) -> None:
        """Delete a tag."""
        self._tags.pop(tag_id, None)
