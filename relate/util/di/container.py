"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from relate.config import Settings
from relate.util.di import PROVIDERS, ConfigProvider, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        settings: Explicit settings; loaded from environment variables
            when omitted

    Returns:
        Configured DI container with production providers
    """
    provider_instances = []
    for base in PROVIDERS:
        provider_class = get_provider(base, use_mock=False)
        if issubclass(provider_class, ConfigProvider):
            provider_instances.append(provider_class(settings))
        else:
            provider_instances.append(provider_class())
    return make_async_container(*provider_instances)
