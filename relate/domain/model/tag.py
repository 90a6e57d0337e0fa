"""Tag entity for the relationship and suggestion engine."""

from collections.abc import Iterable
from datetime import datetime

from pydantic import Field, model_validator

from relate.domain.model.common import DomainModel
from relate.domain.value import TagId


class Tag(DomainModel):
    """Tag entity: a named, described concept.

    Relations hold the IDs of tags that share vocabulary with this one.
    They are derived data owned by the relationship indexer; callers
    never edit them by hand.
    """

    id: TagId
    name: str
    description: str = ""
    relations: frozenset[TagId] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_no_self_relation(self) -> "Tag":
        """A tag is never related to itself."""
        if self.id in self.relations:
            raise ValueError(f"Tag {self.id} cannot be related to itself")
        return self

    def add_relationships(self, related_ids: Iterable[TagId]) -> "Tag":
        """Return a copy with the given IDs added to relations.

        The tag's own ID is dropped from the input.
        """
        added = frozenset(related_ids) - {self.id}
        return self.model_copy(update={"relations": self.relations | added})

    def remove_relationships(self, unrelated_ids: Iterable[TagId]) -> "Tag":
        """Return a copy with the given IDs removed from relations."""
        return self.model_copy(
            update={"relations": self.relations - frozenset(unrelated_ids)}
        )
