"""Domain value objects for the tag engine."""

from relate.domain.value.identifiers import TagId
from relate.domain.value.types import TagOrder

__all__ = [
    # Identifiers
    "TagId",
    # Types
    "TagOrder",
]
