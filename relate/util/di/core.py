"""Core DI providers."""

from dishka import Scope, provide

from relate.config import IndexingSettings, Settings
from relate.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Config component base.

    Implementations accept explicit settings; otherwise they build their own.
    """

    __mock_component__ = "config"

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._explicit_settings = settings


class ProdConfigProvider(ConfigProvider):
    """Production config provider.

    Settings are loaded from environment variables and .env file unless
    passed in explicitly.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        if self._explicit_settings is not None:
            return self._explicit_settings
        return Settings()

    @provide(scope=Scope.APP)
    def provide_indexing_settings(self, settings: Settings) -> IndexingSettings:
        """Provide indexing settings."""
        return settings.indexing
