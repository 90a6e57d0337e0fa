"""Application layer DI providers."""

from dishka import Scope, provide

from relate.application.usecase.suggestion import (
    ListSuggestionsUseCase,
    SuggestForTagUseCase,
    SuggestTagsUseCase,
)
from relate.application.usecase.tag import (
    CreateTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    RemoveTagUseCase,
    UpdateTagUseCase,
)
from relate.domain.service import SuggestionService, TagService
from relate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_create_tag_use_case(self, tag_service: TagService) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_get_tag_use_case(self, tag_service: TagService) -> GetTagUseCase:
        """Provide get tag use case."""
        return GetTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_update_tag_use_case(self, tag_service: TagService) -> UpdateTagUseCase:
        """Provide update tag use case."""
        return UpdateTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_tag_use_case(self, tag_service: TagService) -> RemoveTagUseCase:
        """Provide remove tag use case."""
        return RemoveTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    # Suggestion use cases
    @provide(scope=Scope.REQUEST)
    def get_suggest_tags_use_case(
        self, suggestion_service: SuggestionService
    ) -> SuggestTagsUseCase:
        """Provide suggest tags use case."""
        return SuggestTagsUseCase(suggestion_service=suggestion_service)

    @provide(scope=Scope.REQUEST)
    def get_suggest_for_tag_use_case(
        self, tag_service: TagService, suggestion_service: SuggestionService
    ) -> SuggestForTagUseCase:
        """Provide suggest for tag use case."""
        return SuggestForTagUseCase(
            tag_service=tag_service, suggestion_service=suggestion_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_suggestions_use_case(
        self, suggestion_service: SuggestionService
    ) -> ListSuggestionsUseCase:
        """Provide list suggestions use case."""
        return ListSuggestionsUseCase(suggestion_service=suggestion_service)
