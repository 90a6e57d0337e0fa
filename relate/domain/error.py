"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TagRemovalError(DomainError):
    """Raised when removing a tag that is not in the store."""

    def __init__(self, tag_id: str):
        self.tag_id = tag_id
        super().__init__(f"Could not remove Tag: {tag_id}")


class TagUpdateError(DomainError):
    """Raised when updating a tag that is not in the store.

    Update never inserts; use add_tag for new tags.
    """

    def __init__(self, tag_id: str):
        self.tag_id = tag_id
        super().__init__(f"Tag {tag_id} could not be updated")
