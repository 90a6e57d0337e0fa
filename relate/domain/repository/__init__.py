"""Repository interfaces for the tag engine domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from relate.domain.repository.suggestion import SuggestionRepository
from relate.domain.repository.tag import TagRepository

__all__ = [
    "SuggestionRepository",
    "TagRepository",
]
