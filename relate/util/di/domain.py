"""Domain layer DI providers."""

from dishka import Scope, provide

from relate.config import IndexingSettings
from relate.domain.repository import SuggestionRepository, TagRepository
from relate.domain.service import (
    RelationshipIndexer,
    SuggestionIndex,
    SuggestionService,
    TagService,
    Tokenizer,
)
from relate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are APP-scoped so that every request shares one engine
    and one write lock.
    """

    scope = Scope.APP

    @provide
    def get_tokenizer(self, indexing_settings: IndexingSettings) -> Tokenizer:
        """Provide tokenizer configured with the indexing delimiters."""
        return Tokenizer(delimiters=indexing_settings.delimiters)

    @provide
    def get_relationship_indexer(
        self, tag_repository: TagRepository, tokenizer: Tokenizer
    ) -> RelationshipIndexer:
        """Provide relationship indexer."""
        return RelationshipIndexer(tag_repository=tag_repository, tokenizer=tokenizer)

    @provide
    def get_suggestion_index(
        self, suggestion_repository: SuggestionRepository, tokenizer: Tokenizer
    ) -> SuggestionIndex:
        """Provide suggestion index."""
        return SuggestionIndex(
            suggestion_repository=suggestion_repository, tokenizer=tokenizer
        )

    @provide
    def get_tag_service(
        self,
        tag_repository: TagRepository,
        relationship_indexer: RelationshipIndexer,
        suggestion_index: SuggestionIndex,
        indexing_settings: IndexingSettings,
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            tag_repository=tag_repository,
            relationship_indexer=relationship_indexer,
            suggestion_index=suggestion_index,
            indexing_settings=indexing_settings,
        )

    @provide
    def get_suggestion_service(
        self,
        tag_service: TagService,
        suggestion_index: SuggestionIndex,
        tokenizer: Tokenizer,
    ) -> SuggestionService:
        """Provide suggestion domain service."""
        return SuggestionService(
            tag_service=tag_service,
            suggestion_index=suggestion_index,
            tokenizer=tokenizer,
        )
