"""Shared tag response models."""

from datetime import datetime

from pydantic import BaseModel

from relate.domain.model.tag import Tag


class TagItem(BaseModel):
    """Tag item in responses."""

    tag_id: str
    name: str
    description: str
    related_tag_ids: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        """Build a response item from a domain tag."""
        return cls(
            tag_id=str(tag.id),
            name=tag.name,
            description=tag.description,
            related_tag_ids=sorted(str(i) for i in tag.relations),
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )
