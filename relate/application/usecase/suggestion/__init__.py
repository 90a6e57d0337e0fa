"""Suggestion use cases."""

from .list_suggestions import (
    ListSuggestionsResponse,
    ListSuggestionsUseCase,
    SuggestionEntry,
)
from .suggest_for_tag import (
    SuggestForTagRequest,
    SuggestForTagResponse,
    SuggestForTagUseCase,
)
from .suggest_tags import SuggestTagsRequest, SuggestTagsResponse, SuggestTagsUseCase

__all__ = [
    "ListSuggestionsResponse",
    "ListSuggestionsUseCase",
    "SuggestForTagRequest",
    "SuggestForTagResponse",
    "SuggestForTagUseCase",
    "SuggestTagsRequest",
    "SuggestTagsResponse",
    "SuggestTagsUseCase",
    "SuggestionEntry",
]
