"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    PostItem,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.domain.value import PostStatus
from blog.interface.api.auth import require_actor
from blog.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(default="", max_length=50000)
    status: PostStatus = PostStatus.PUBLISHED


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Create a post authored by the current user."""
    actor = require_actor(jwt_service, auth_token, authorization)

    try:
        use_case_request = CreatePostRequest(
            author_id=str(actor.user_id),
            title=request.title,
            content=request.content,
            status=request.status,
        )
        return await create_post_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostItem:
    """Get a post with its comment count."""
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
