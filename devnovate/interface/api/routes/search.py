"""Search routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from devnovate.application.usecase.search import (
    SuggestSearchRequest,
    SuggestSearchResponse,
    SuggestSearchUseCase,
)

router = APIRouter(prefix="/search", tags=["search"], route_class=DishkaRoute)


@router.get("/suggestions", response_model=SuggestSearchResponse)
async def search_suggestions(
    suggest_search_use_case: FromDishka[SuggestSearchUseCase],
    q: str = Query(default="", max_length=200),
    limit: int = Query(default=5, ge=1, le=20),
) -> SuggestSearchResponse:
    """Type-ahead suggestions for the search box.

    Args:
        q: Text typed so far; fewer than two characters suggests nothing
        limit: Maximum suggestions of each kind

    Returns:
        Matching blog titles, tags and authors
    """
    return await suggest_search_use_case.execute(SuggestSearchRequest(q=q, limit=limit))
