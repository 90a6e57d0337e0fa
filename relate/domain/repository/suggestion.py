"""Suggestion repository interface."""

from abc import ABC, abstractmethod

from relate.domain.value import TagId


class SuggestionRepository(ABC):
    """Repository interface for the token -> tag IDs index."""

    @abstractmethod
    async def add(self, token: str, tag_id: TagId) -> None:
        """Associate a tag with a token, creating the entry if absent.

        Args:
            token: Normalized token
            tag_id: Tag identifier
        """
        pass

    @abstractmethod
    async def discard(self, token: str, tag_id: TagId) -> None:
        """Remove a tag from a token entry.

        Entries left empty are dropped. Unknown tokens are ignored.

        Args:
            token: Normalized token
            tag_id: Tag identifier
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> frozenset[TagId]:
        """Find the tags associated with a token.

        Args:
            token: Normalized token

        Returns:
            Tag IDs, empty if the token is not indexed
        """
        pass

    @abstractmethod
    async def find_all(self) -> dict[str, frozenset[TagId]]:
        """Return every index entry.

        Returns:
            Mapping of token to tag IDs
        """
        pass
