"""In-memory implementation of Suggestion repository."""

from relate.domain.repository.suggestion import SuggestionRepository
from relate.domain.value import TagId


class InMemorySuggestionRepository(SuggestionRepository):
    """In-memory implementation of SuggestionRepository."""

    def __init__(self) -> None:
        """Initialize empty index."""
        self._entries: dict[str, set[TagId]] = {}

    async def add(self, token: str, tag_id: TagId) -> None:
        """Associate a tag with a token."""
        self._entries.setdefault(token, set()).add(tag_id)

    async def discard(self, token: str, tag_id: TagId) -> None:
        """Remove a tag from a token entry."""
        tag_ids = self._entries.get(token)
        if tag_ids is None:
            return
        tag_ids.discard(tag_id)
        if not tag_ids:
            del self._entries[token]

    async def find_by_token(self, token: str) -> frozenset[TagId]:
        """Find the tags associated with a token."""
        return frozenset(self._entries.get(token, ()))

    async def find_all(self) -> dict[str, frozenset[TagId]]:
        """Return every index entry."""
        return {token: frozenset(ids) for token, ids in self._entries.items()}
