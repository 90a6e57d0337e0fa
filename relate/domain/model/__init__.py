"""Domain model entities for the tag engine."""

from relate.domain.model.tag import Tag

__all__ = [
    "Tag",
]
