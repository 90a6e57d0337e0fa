"""Unit tests for the Tag entity."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from relate.domain.model.tag import Tag
from relate.domain.value import TagId
from tests.conftest import make_tag


class TestTag:
    """Tests for Tag construction and relationship helpers."""

    def test_new_tag_has_no_relations(self):
        """A freshly built tag has an empty relation set."""
        tag = make_tag("Poetry", "writing")

        assert tag.relations == frozenset()

    def test_long_text_accepted(self):
        """Name and description have no length limit."""
        tag = make_tag("Essay " * 100, "word, " * 1000)

        assert len(tag.description) == 6000

    def test_self_relation_rejected(self):
        """Constructing a tag related to itself should fail."""
        tag_id = TagId(uuid4())

        with pytest.raises(ValidationError, match="cannot be related to itself"):
            Tag(id=tag_id, name="Poetry", relations=frozenset({tag_id}))

    def test_tag_is_immutable(self):
        """Tags are frozen."""
        tag = make_tag("Poetry", "writing")

        with pytest.raises(ValidationError):
            tag.name = "Prose"

    def test_add_relationships_returns_new_tag(self):
        """Adding relationships unions the IDs without touching the original."""
        tag = make_tag("Poetry", "writing")
        first, second = TagId(uuid4()), TagId(uuid4())

        related = tag.add_relationships([first, second, first])

        assert related.relations == {first, second}
        assert tag.relations == frozenset()
        assert related.id == tag.id

    def test_add_relationships_ignores_own_id(self):
        """A tag's own ID never enters its relations."""
        tag = make_tag("Poetry", "writing")

        related = tag.add_relationships([tag.id])

        assert tag.id not in related.relations

    def test_remove_relationships_is_set_difference(self):
        """Removing relationships drops only the given IDs."""
        first, second = TagId(uuid4()), TagId(uuid4())
        tag = make_tag("Poetry", "writing").add_relationships([first, second])

        unrelated = tag.remove_relationships([first, TagId(uuid4())])

        assert unrelated.relations == {second}
        assert tag.relations == {first, second}
