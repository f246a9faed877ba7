"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from alumni.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all available tags",
    description="Get a list of all tags used to categorize discussion threads.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    limit: int = Query(default=100, ge=1, le=100),
    order_by: str = Query(default="name", pattern="^(name|created_at)$"),
) -> ListTagsResponse:
    """List all available tags.

    Example:
        GET /tags?limit=10&order_by=name
    """
    with logfire.span("api.list_tags", limit=limit, order_by=order_by):
        request = ListTagsRequest(limit=limit, order_by=order_by)
        return await use_case.execute(request)
