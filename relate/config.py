"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DELIMITERS = (",", "&", " ", ";", ":")


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class IndexingSettings(BaseModel):
    """Tag indexing configuration."""

    # Fragments of a tag's name and description are split on these
    delimiters: list[str] = list(DEFAULT_DELIMITERS)

    # Drop a removed tag's ID from the relations of its former neighbours.
    # When False, surviving tags keep dangling relation IDs.
    prune_removed_relations: bool = True

    # Drop a removed tag's ID from the suggestion index.
    # When False, suggestion entries keep stale IDs, which are filtered
    # out at query time.
    clean_removed_suggestions: bool = True

    @field_validator("delimiters")
    @classmethod
    def validate_delimiters(cls, v: list[str]) -> list[str]:
        """Require at least one non-empty delimiter."""
        if not v or any(d == "" for d in v):
            raise ValueError("Delimiters must be a non-empty list of non-empty strings")
        return v


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        INDEXING__PRUNE_REMOVED_RELATIONS=false
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows INDEXING__DELIMITERS syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    observability: ObservabilitySettings = ObservabilitySettings()
    indexing: IndexingSettings = IndexingSettings()
