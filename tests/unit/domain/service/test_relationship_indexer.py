"""Unit tests for RelationshipIndexer."""

import pytest

from relate.domain.service import RelationshipIndexer, Tokenizer
from relate.persistence.repository.inmemory import InMemoryTagRepository
from tests.conftest import make_tag


@pytest.fixture
def tag_repository():
    """Empty in-memory tag store."""
    return InMemoryTagRepository()


@pytest.fixture
def indexer(tag_repository):
    """Indexer over the in-memory store."""
    return RelationshipIndexer(tag_repository=tag_repository, tokenizer=Tokenizer())


class TestIndexAll:
    """Tests for index_all method."""

    @pytest.mark.asyncio
    async def test_relates_overlapping_pairs_on_both_sides(
        self, tag_repository, indexer
    ):
        """Every overlapping pair gains the mirror relation."""
        poetry = make_tag("Poetry", "writing, art")
        blogging = make_tag("Blogging", "writing, social media")
        cooking = make_tag("Cooking", "recipe, social")
        for tag in (poetry, blogging, cooking):
            await tag_repository.save(tag)

        changed = await indexer.index_all()

        assert changed == 3
        assert (await tag_repository.find_by_id(poetry.id)).relations == {blogging.id}
        assert (await tag_repository.find_by_id(blogging.id)).relations == {
            poetry.id,
            cooking.id,
        }
        assert (await tag_repository.find_by_id(cooking.id)).relations == {
            blogging.id
        }

    @pytest.mark.asyncio
    async def test_second_pass_changes_nothing(self, tag_repository, indexer):
        """A pass over an already indexed store writes nothing."""
        await tag_repository.save(make_tag("Poetry", "writing"))
        await tag_repository.save(make_tag("Blogging", "writing"))

        await indexer.index_all()

        assert await indexer.index_all() == 0

    @pytest.mark.asyncio
    async def test_never_removes_relations(self, tag_repository, indexer):
        """Relations that no longer hold survive a pass."""
        poetry = make_tag("Poetry", "writing")
        blogging = make_tag("Blogging", "writing")
        await tag_repository.save(poetry)
        await tag_repository.save(blogging)
        await indexer.index_all()

        stored = await tag_repository.find_by_id(blogging.id)
        await tag_repository.save(stored.model_copy(update={"description": "vlogging"}))
        await indexer.index_all()

        assert (await tag_repository.find_by_id(poetry.id)).relations == {blogging.id}

    @pytest.mark.asyncio
    async def test_empty_and_single_tag_store(self, tag_repository, indexer):
        """Nothing to relate in an empty or single-tag store."""
        assert await indexer.index_all() == 0

        await tag_repository.save(make_tag("Poetry", "writing poetry"))

        assert await indexer.index_all() == 0


class TestPrune:
    """Tests for prune method."""

    @pytest.mark.asyncio
    async def test_prune_removes_id_from_neighbours(self, tag_repository, indexer):
        """Former neighbours lose the removed ID; others are untouched."""
        poetry = make_tag("Poetry", "writing")
        blogging = make_tag("Blogging", "writing, media")
        news = make_tag("News", "media")
        for tag in (poetry, blogging, news):
            await tag_repository.save(tag)
        await indexer.index_all()

        removed = await tag_repository.find_by_id(poetry.id)
        await tag_repository.delete(poetry.id)
        pruned = await indexer.prune(removed)

        assert pruned == 1
        assert (await tag_repository.find_by_id(blogging.id)).relations == {news.id}
        assert (await tag_repository.find_by_id(news.id)).relations == {blogging.id}
