"""Engine bootstrap."""

from dishka import AsyncContainer

from relate.config import Settings
from relate.util.di.container import create_container
from relate.util.logging import get_logger, setup_logging
from relate.util.observability import configure_logfire


def create_engine(settings: Settings | None = None) -> AsyncContainer:
    """Create a tag engine.

    Configures logging and Logfire, then builds the DI container that owns
    the tag store and both indexes.

    Usage:
        container = create_engine()
        async with container() as request_container:
            use_case = await request_container.get(CreateTagUseCase)
            await use_case.execute(CreateTagRequest(name="Poetry", description="writing, art"))
        await container.close()

    Args:
        settings: Engine settings; loaded from the environment when omitted

    Returns:
        Configured DI container
    """
    settings = settings or Settings()

    setup_logging(settings)
    configure_logfire(settings)

    container = create_container(settings)
    get_logger(__name__).info(f"Tag engine created: environment={settings.environment}")
    return container
