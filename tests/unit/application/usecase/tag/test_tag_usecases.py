"""Unit tests for tag use cases."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from relate.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    GetTagRequest,
    GetTagUseCase,
    ListTagsRequest,
    ListTagsUseCase,
    RemoveTagRequest,
    RemoveTagUseCase,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from relate.domain.error import NotFoundError, TagRemovalError, TagUpdateError
from relate.domain.value import TagOrder
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateTagUseCase:
    """Tests for CreateTagUseCase."""

    def test_request_bounds_description(self):
        """Requests cap the description at 2000 characters."""
        with pytest.raises(ValidationError):
            CreateTagRequest(name="Essay", description="x" * 2001)

    @pytest.mark.asyncio
    async def test_create_tag_returns_indexed_tag(self, unit_env):
        """Creating a tag stores it and reports its relations."""
        create = await unit_env.get(CreateTagUseCase)

        poetry = await create.execute(
            CreateTagRequest(name="Poetry", description="writing, art")
        )
        blogging = await create.execute(
            CreateTagRequest(name="Blogging", description="writing, social media")
        )

        assert blogging.tag.name == "Blogging"
        assert blogging.tag.related_tag_ids == [poetry.tag.tag_id]


class TestGetTagUseCase:
    """Tests for GetTagUseCase."""

    @pytest.mark.asyncio
    async def test_get_tag_sees_later_relations(self, unit_env):
        """Fetching a tag shows relations discovered after it was created."""
        create = await unit_env.get(CreateTagUseCase)
        get = await unit_env.get(GetTagUseCase)
        poetry = await create.execute(CreateTagRequest(name="Poetry", description="writing"))
        blogging = await create.execute(
            CreateTagRequest(name="Blogging", description="writing")
        )

        response = await get.execute(GetTagRequest(tag_id=poetry.tag.tag_id))

        assert response.tag.related_tag_ids == [blogging.tag.tag_id]

    @pytest.mark.asyncio
    async def test_get_missing_tag_raises(self, unit_env):
        """Unknown IDs raise NotFoundError."""
        get = await unit_env.get(GetTagUseCase)

        with pytest.raises(NotFoundError):
            await get.execute(GetTagRequest(tag_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_malformed_id_raises_value_error(self, unit_env):
        """IDs that are not UUIDs are rejected."""
        get = await unit_env.get(GetTagUseCase)

        with pytest.raises(ValueError):
            await get.execute(GetTagRequest(tag_id="not-a-uuid"))


class TestUpdateTagUseCase:
    """Tests for UpdateTagUseCase."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env):
        """Only supplied fields change."""
        create = await unit_env.get(CreateTagUseCase)
        update = await unit_env.get(UpdateTagUseCase)
        created = await create.execute(
            CreateTagRequest(name="Poetry", description="writing")
        )

        response = await update.execute(
            UpdateTagRequest(tag_id=created.tag.tag_id, description="verse")
        )

        assert response.tag.name == "Poetry"
        assert response.tag.description == "verse"

    @pytest.mark.asyncio
    async def test_update_missing_tag_raises(self, unit_env):
        """Updating an unknown ID raises TagUpdateError."""
        update = await unit_env.get(UpdateTagUseCase)

        with pytest.raises(TagUpdateError):
            await update.execute(UpdateTagRequest(tag_id=str(uuid4()), name="Prose"))


class TestRemoveTagUseCase:
    """Tests for RemoveTagUseCase."""

    @pytest.mark.asyncio
    async def test_remove_tag(self, unit_env):
        """Removing a tag reports it and hides it from listings."""
        create = await unit_env.get(CreateTagUseCase)
        remove = await unit_env.get(RemoveTagUseCase)
        list_tags = await unit_env.get(ListTagsUseCase)
        created = await create.execute(CreateTagRequest(name="Poetry", description=""))

        response = await remove.execute(RemoveTagRequest(tag_id=created.tag.tag_id))

        assert response.success is True
        assert response.name == "Poetry"
        assert (await list_tags.execute(ListTagsRequest())).tags == []

    @pytest.mark.asyncio
    async def test_remove_missing_tag_raises(self, unit_env):
        """Removing an unknown ID raises TagRemovalError."""
        remove = await unit_env.get(RemoveTagUseCase)

        with pytest.raises(TagRemovalError):
            await remove.execute(RemoveTagRequest(tag_id=str(uuid4())))


class TestListTagsUseCase:
    """Tests for ListTagsUseCase."""

    @pytest.mark.asyncio
    async def test_list_tags_by_name_with_limit(self, unit_env):
        """Tags are listed by name and truncated to the limit."""
        create = await unit_env.get(CreateTagUseCase)
        list_tags = await unit_env.get(ListTagsUseCase)
        for name in ["Poetry", "Blogging", "Medicine"]:
            await create.execute(CreateTagRequest(name=name))

        everything = await list_tags.execute(ListTagsRequest())
        first_two = await list_tags.execute(
            ListTagsRequest(limit=2, order_by=TagOrder.NAME)
        )

        assert [t.name for t in everything.tags] == ["Blogging", "Medicine", "Poetry"]
        assert [t.name for t in first_two.tags] == ["Blogging", "Medicine"]

    def test_invalid_limit_rejected(self):
        """Limits below one are invalid."""
        with pytest.raises(ValueError):
            ListTagsRequest(limit=0)
