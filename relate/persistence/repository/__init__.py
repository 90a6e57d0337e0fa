"""Repository implementations.

Storage lives for the lifetime of the process; there is no durable backend.
"""

from relate.domain.repository import SuggestionRepository, TagRepository
from relate.persistence.repository.inmemory import (
    InMemorySuggestionRepository,
    InMemoryTagRepository,
)

__all__ = [
    "InMemorySuggestionRepository",
    "InMemoryTagRepository",
    # Re-export interfaces for convenience
    "SuggestionRepository",
    "TagRepository",
]
