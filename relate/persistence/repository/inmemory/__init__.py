"""In-memory repository implementations."""

from .suggestion import InMemorySuggestionRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemorySuggestionRepository",
    "InMemoryTagRepository",
]
