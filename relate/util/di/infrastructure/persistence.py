"""Persistence infrastructure providers."""

from dishka import Scope, provide

from relate.domain.repository import SuggestionRepository, TagRepository
from relate.persistence.repository.inmemory import (
    InMemorySuggestionRepository,
    InMemoryTagRepository,
)
from relate.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """In-memory persistence provider.

    APP scope: one tag store and one suggestion index per container, kept
    for the container's lifetime.
    """

    scope = Scope.APP

    @provide
    def get_tag_repository(self) -> TagRepository:
        """Provide Tag repository."""
        return InMemoryTagRepository()

    @provide
    def get_suggestion_repository(self) -> SuggestionRepository:
        """Provide Suggestion repository."""
        return InMemorySuggestionRepository()
