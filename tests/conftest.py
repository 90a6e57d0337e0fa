"""Test configuration and fixtures."""

from uuid import UUID, uuid4

import logfire
import pytest

from relate.domain.model.tag import Tag
from relate.domain.value import TagId


@pytest.fixture(scope="session", autouse=True)
def configure_test_logfire():
    """Keep Logfire local and quiet during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_tag(name: str, description: str = "", tag_id: UUID | None = None) -> Tag:
    """Helper function to build unstored test tags.

    Args:
        name: Tag name
        description: Tag description
        tag_id: Optional fixed ID, random when omitted

    Returns:
        Tag with no relations
    """
    return Tag(id=TagId(tag_id or uuid4()), name=name, description=description)
