"""Domain value types for the tag engine."""

from enum import Enum


class TagOrder(str, Enum):
    """Sort order for tag enumeration."""

    NAME = "name"
    CREATED_AT = "created_at"
