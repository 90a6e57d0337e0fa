"""Relationship indexer domain service."""

from itertools import combinations

import logfire

from relate.domain.model.tag import Tag
from relate.domain.repository.tag import TagRepository
from relate.domain.value import TagId

from .base import Service
from .tokenizer import Tokenizer


class RelationshipIndexer(Service):
    """Discovers tags related by shared vocabulary.

    Every pass compares every pair of tags, O(n^2) in the number of tags.
    Relations only accumulate: a pass never removes a relation that no
    longer holds.
    """

    def __init__(self, tag_repository: TagRepository, tokenizer: Tokenizer) -> None:
        """Initialize relationship indexer.

        Args:
            tag_repository: Tag repository
            tokenizer: Tokenizer used for decomposition
        """
        self.tag_repository = tag_repository
        self.tokenizer = tokenizer

    async def index_all(self) -> int:
        """Recompute relations across every tag in the store.

        Reads one snapshot of the store, relates each overlapping pair on
        both sides, then writes back only the tags whose relations grew.

        Returns:
            Number of tags whose relations changed
        """
        with logfire.span("relationship_indexer.index_all") as span:
            snapshot = await self.tag_repository.find_all()
            tokens = {tag.id: self.tokenizer.decompose(tag) for tag in snapshot}
            indexed: dict[TagId, Tag] = {tag.id: tag for tag in snapshot}

            for first, second in combinations(snapshot, 2):
                if tokens[first.id].isdisjoint(tokens[second.id]):
                    continue
                indexed[first.id] = indexed[first.id].add_relationships([second.id])
                indexed[second.id] = indexed[second.id].add_relationships([first.id])

            changed = [
                tag
                for tag in snapshot
                if indexed[tag.id].relations != tag.relations
            ]
            for tag in changed:
                await self.tag_repository.save(indexed[tag.id])

            span.set_attribute("tag_count", len(snapshot))
            span.set_attribute("changed_count", len(changed))
            return len(changed)

    async def prune(self, removed: Tag) -> int:
        """Drop a removed tag's ID from its former neighbours.

        Relations are symmetric, so the removed tag's own relations name
        every tag that can still reference it.

        Args:
            removed: The tag as it was before removal

        Returns:
            Number of neighbours updated
        """
        with logfire.span("relationship_indexer.prune", tag_id=str(removed.id)):
            neighbours = await self.tag_repository.find_by_ids(sorted(removed.relations))
            for neighbour in neighbours:
                await self.tag_repository.save(
                    neighbour.remove_relationships([removed.id])
                )
            logfire.info(
                "Dangling relations pruned",
                tag_id=str(removed.id),
                count=len(neighbours),
            )
            return len(neighbours)
