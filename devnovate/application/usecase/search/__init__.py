"""Search use cases."""

from .suggest import (
    AuthorSuggestion,
    SearchSuggestions,
    SuggestSearchRequest,
    SuggestSearchResponse,
    SuggestSearchUseCase,
    TagSuggestion,
    TitleSuggestion,
)

__all__ = [
    "AuthorSuggestion",
    "SearchSuggestions",
    "SuggestSearchRequest",
    "SuggestSearchResponse",
    "SuggestSearchUseCase",
    "TagSuggestion",
    "TitleSuggestion",
]
