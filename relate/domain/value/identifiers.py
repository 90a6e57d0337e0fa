"""Strongly typed identifiers for tag engine entities.

Using NewType for strong typing prevents mixing up tag IDs with other
UUIDs and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

TagId = NewType("TagId", UUID)
