"""Unit tests for engine bootstrap."""

import pytest

from relate.application.usecase.suggestion import SuggestTagsRequest, SuggestTagsUseCase
from relate.application.usecase.tag import CreateTagRequest, CreateTagUseCase
from relate.config import ObservabilitySettings, Settings
from relate.interface.engine import create_engine


class TestCreateEngine:
    """Tests for create_engine."""

    @pytest.mark.asyncio
    async def test_engine_round_trip(self):
        """A created engine stores tags and answers suggestions."""
        settings = Settings(
            _env_file=None,
            environment="test",
            observability=ObservabilitySettings(send_to_logfire=False),
        )
        container = create_engine(settings)

        async with container() as request_container:
            create = await request_container.get(CreateTagUseCase)
            suggest = await request_container.get(SuggestTagsUseCase)

            created = await create.execute(
                CreateTagRequest(name="Poetry", description="writing, art")
            )
            response = await suggest.execute(SuggestTagsRequest(word="ART"))

        assert [t.tag_id for t in response.tags] == [created.tag.tag_id]
        assert (await container.get(Settings)) is settings
        await container.close()
