"""Search suggestions use case."""

from typing import Literal

from pydantic import BaseModel, Field

from devnovate.domain.service import BlogService, UserService

# Shorter queries match too much to be useful
MIN_QUERY_LENGTH = 2


class SuggestSearchRequest(BaseModel):
    """Search suggestions request."""

    q: str = ""
    limit: int = Field(default=5, ge=1, le=20)


class TitleSuggestion(BaseModel):
    """Published blog whose title matches."""

    type: Literal["title"] = "title"
    text: str
    id: str


class TagSuggestion(BaseModel):
    """Tag that matches, with how many published blogs use it."""

    type: Literal["tag"] = "tag"
    text: str
    count: int


class AuthorSuggestion(BaseModel):
    """User whose display name matches."""

    type: Literal["author"] = "author"
    text: str
    id: str


class SearchSuggestions(BaseModel):
    """Suggestions grouped by kind."""

    titles: list[TitleSuggestion] = Field(default_factory=list)
    tags: list[TagSuggestion] = Field(default_factory=list)
    authors: list[AuthorSuggestion] = Field(default_factory=list)


class SuggestSearchResponse(BaseModel):
    """Search suggestions response."""

    suggestions: SearchSuggestions


class SuggestSearchUseCase:
    """Use case for type-ahead suggestions across titles, tags and authors."""

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        """Initialize suggest search use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service
        """
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: SuggestSearchRequest) -> SuggestSearchResponse:
        """Suggest up to `limit` entries of each kind for a query.

        Queries shorter than two characters, ignoring surrounding
        whitespace, get no suggestions.
        """
        query = request.q.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return SuggestSearchResponse(suggestions=SearchSuggestions())

        blogs = await self.blog_service.search_titles(query, limit=request.limit)
        tags = await self.blog_service.popular_tags(
            limit=request.limit, containing=query
        )
        users = await self.user_service.search_by_display_name(
            query, limit=request.limit
        )

        return SuggestSearchResponse(
            suggestions=SearchSuggestions(
                titles=[TitleSuggestion(text=b.title, id=str(b.id)) for b in blogs],
                tags=[TagSuggestion(text=t.tag, count=t.count) for t in tags],
                authors=[
                    AuthorSuggestion(text=u.display_name, id=str(u.id)) for u in users
                ],
            )
        )
