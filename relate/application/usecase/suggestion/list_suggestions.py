"""List suggestion index entries use case."""

from pydantic import BaseModel

from relate.domain.service import SuggestionService


class SuggestionEntry(BaseModel):
    """One suggestion index entry."""

    token: str
    tag_ids: list[str]


class ListSuggestionsResponse(BaseModel):
    """List suggestions response."""

    entries: list[SuggestionEntry]


class ListSuggestionsUseCase:
    """Use case for dumping the whole suggestion index."""

    def __init__(self, suggestion_service: SuggestionService) -> None:
        """Initialize list suggestions use case.

        Args:
            suggestion_service: Suggestion domain service
        """
        self.suggestion_service = suggestion_service

    async def execute(self) -> ListSuggestionsResponse:
        """Execute list suggestions flow.

        Returns:
            Entries sorted by token
        """
        entries = await self.suggestion_service.get_all_suggestions()
        return ListSuggestionsResponse(
            entries=[
                SuggestionEntry(token=token, tag_ids=sorted(str(i) for i in tag_ids))
                for token, tag_ids in sorted(entries.items())
            ]
        )
