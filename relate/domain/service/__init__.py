"""Domain services."""

from .base import Service
from .relationship_indexer import RelationshipIndexer
from .suggestion_index import SuggestionIndex
from .suggestion_service import SuggestionService
from .tag_service import TagService
from .tokenizer import DEFAULT_DELIMITERS, Tokenizer

__all__ = [
    "DEFAULT_DELIMITERS",
    "RelationshipIndexer",
    "Service",
    "SuggestionIndex",
    "SuggestionService",
    "TagService",
    "Tokenizer",
]
