"""Tag domain service."""

import asyncio
from collections.abc import Iterable
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from relate.config import IndexingSettings
from relate.domain.error import NotFoundError, TagRemovalError, TagUpdateError
from relate.domain.model.tag import Tag
from relate.domain.repository.tag import TagRepository
from relate.domain.value import TagId, TagOrder

from .base import Service
from .relationship_indexer import RelationshipIndexer
from .suggestion_index import SuggestionIndex


class TagService(Service):
    """Domain service owning the tag store and its indexes.

    Every mutation re-runs the full relationship pass before returning.
    Mutations serialize on one lock; reads never take it.
    """

    def __init__(
        self,
        tag_repository: TagRepository,
        relationship_indexer: RelationshipIndexer,
        suggestion_index: SuggestionIndex,
        indexing_settings: IndexingSettings,
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            relationship_indexer: Relationship indexer
            suggestion_index: Suggestion index
            indexing_settings: Indexing configuration
        """
        self.tag_repository = tag_repository
        self.relationship_indexer = relationship_indexer
        self.suggestion_index = suggestion_index
        self.indexing_settings = indexing_settings
        self._write_lock = asyncio.Lock()

    def create_tag(self, name: str, description: str) -> Tag:
        """Build a new tag with a fresh ID and no relations.

        The tag is not stored; pass it to add_tag.
        """
        return Tag(id=TagId(uuid4()), name=name, description=description)

    async def add_tag(self, tag: Tag) -> Tag:
        """Insert a tag, or overwrite the stored tag with the same ID.

        Relations supplied by the caller are ignored: a new tag starts
        with none and an overwritten tag keeps its stored relations.

        Args:
            tag: Tag to add

        Returns:
            The stored tag after indexing
        """
        with logfire.span(
            "tag_service.add_tag", tag_id=str(tag.id), tag_name=tag.name
        ):
            async with self._write_lock:
                existing = await self.tag_repository.find_by_id(tag.id)
                if existing:
                    logfire.info("Overwriting existing tag", tag_id=str(tag.id))
                    await self.suggestion_index.unindex(existing)
                    tag = tag.model_copy(
                        update={
                            "relations": existing.relations,
                            "created_at": existing.created_at,
                            "updated_at": datetime.now(),
                        }
                    )
                else:
                    tag = tag.model_copy(update={"relations": frozenset()})

                await self.tag_repository.save(tag)
                await self.relationship_indexer.index_all()
                await self.suggestion_index.index(tag)

                logfire.info("Tag added", tag_id=str(tag.id), tag_name=tag.name)
                return await self.get_tag(tag.id)

    async def find_tag(self, tag_id: TagId) -> Optional[Tag]:
        """Get a tag by ID.

        Returns:
            Tag if found, None otherwise
        """
        return await self.tag_repository.find_by_id(tag_id)

    async def get_tag(self, tag_id: TagId) -> Tag:
        """Get a tag by ID.

        Raises:
            NotFoundError: If the tag does not exist
        """
        tag = await self.tag_repository.find_by_id(tag_id)
        if tag is None:
            logfire.warn("Tag not found", tag_id=str(tag_id))
            raise NotFoundError("Tag", str(tag_id))
        return tag

    async def remove_tag(self, tag_id: TagId) -> Tag:
        """Remove a tag and re-run the relationship pass.

        Args:
            tag_id: Tag identifier

        Returns:
            The removed tag

        Raises:
            TagRemovalError: If the tag does not exist
        """
        with logfire.span("tag_service.remove_tag", tag_id=str(tag_id)):
            async with self._write_lock:
                removed = await self.tag_repository.find_by_id(tag_id)
                if removed is None:
                    logfire.warn("Removal of non-existent tag", tag_id=str(tag_id))
                    raise TagRemovalError(str(tag_id))

                await self.tag_repository.delete(tag_id)

                if self.indexing_settings.prune_removed_relations:
                    await self.relationship_indexer.prune(removed)
                if self.indexing_settings.clean_removed_suggestions:
                    await self.suggestion_index.unindex(removed)

                await self.relationship_indexer.index_all()

                logfire.info("Tag removed", tag_id=str(tag_id), tag_name=removed.name)
                return removed

    async def update_tag(self, tag: Tag) -> Tag:
        """Replace the stored tag with the same ID.

        The stored relations are kept, the suggestion entries follow the
        new text, and the relationship pass is re-run.

        Args:
            tag: Tag carrying the new name and description

        Returns:
            The stored tag after indexing

        Raises:
            TagUpdateError: If the tag does not exist
        """
        with logfire.span("tag_service.update_tag", tag_id=str(tag.id)):
            async with self._write_lock:
                existing = await self._find_for_update(tag.id)
                return await self._replace(existing, tag)

    async def edit_tag(
        self,
        tag_id: TagId,
        name: str | None = None,
        description: str | None = None,
    ) -> Tag:
        """Change a stored tag's name or description, keeping the rest.

        Args:
            tag_id: Tag identifier
            name: New name, None to keep the stored one
            description: New description, None to keep the stored one

        Returns:
            The stored tag after indexing

        Raises:
            TagUpdateError: If the tag does not exist
        """
        with logfire.span("tag_service.edit_tag", tag_id=str(tag_id)):
            async with self._write_lock:
                existing = await self._find_for_update(tag_id)
                changes = {
                    field: value
                    for field, value in (("name", name), ("description", description))
                    if value is not None
                }
                return await self._replace(existing, existing.model_copy(update=changes))

    async def _find_for_update(self, tag_id: TagId) -> Tag:
        existing = await self.tag_repository.find_by_id(tag_id)
        if existing is None:
            logfire.warn("Update of non-existent tag", tag_id=str(tag_id))
            raise TagUpdateError(str(tag_id))
        return existing

    async def _replace(self, existing: Tag, tag: Tag) -> Tag:
        updated = tag.model_copy(
            update={
                "relations": existing.relations,
                "created_at": existing.created_at,
                "updated_at": datetime.now(),
            }
        )
        await self.tag_repository.save(updated)
        await self.suggestion_index.unindex(existing)
        await self.suggestion_index.index(updated)
        await self.relationship_indexer.index_all()

        logfire.info("Tag updated", tag_id=str(tag.id))
        return await self.get_tag(tag.id)

    async def index_relationships(self) -> int:
        """Run the full relationship pass on demand.

        Returns:
            Number of tags whose relations changed
        """
        async with self._write_lock:
            return await self.relationship_indexer.index_all()

    @staticmethod
    def add_relationships(tag: Tag, related_ids: Iterable[TagId]) -> Tag:
        """Return a copy of tag related to related_ids as well. Store untouched."""
        return tag.add_relationships(related_ids)

    @staticmethod
    def remove_relationships(tag: Tag, unrelated_ids: Iterable[TagId]) -> Tag:
        """Return a copy of tag no longer related to unrelated_ids. Store untouched."""
        return tag.remove_relationships(unrelated_ids)

    async def get_all_tags(
        self, limit: int | None = None, order_by: TagOrder = TagOrder.NAME
    ) -> list[Tag]:
        """Get all stored tags.

        Args:
            limit: Maximum number of tags to return, None for all
            order_by: Field to order by

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags", limit=limit, order_by=order_by):
            tags = await self.tag_repository.find_all(limit=limit, order_by=order_by)
            logfire.info("Tags retrieved", count=len(tags))
            return tags
