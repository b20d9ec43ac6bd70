"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel

from blog.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    ReactToCommentRequest,
    ReactToCommentResponse,
    ReactToCommentUseCase,
    ReportCommentRequest,
    ReportCommentResponse,
    ReportCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.domain.value import CommentSort, ReactionType, ReportReason
from blog.interface.api.auth import require_actor
from blog.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    post_id: str
    parent_comment_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str


class ReportCommentAPIRequest(BaseModel):
    """API request for reporting a comment."""

    reason: ReportReason


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on a post or reply to another comment.

    Requires authentication. Comments that look like spam are stored as
    ``pending`` and stay hidden until an admin approves them.

    Raises:
        HTTPException: 401 if unauthenticated, 404 if the post or parent
            comment is missing, 400 if the content is invalid
    """
    actor = require_actor(jwt_service, auth_token, authorization)

    try:
        use_case_request = CreateCommentRequest(
            post_id=request.post_id,
            content=request.content,
            author_id=str(actor.user_id),
            parent_comment_id=request.parent_comment_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise to_http_exception(e)


@router.get("/post/{post_id}", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    sort: CommentSort = CommentSort.NEWEST,
) -> GetCommentsResponse:
    """Get approved top-level comments for a post with reply previews.

    Public endpoint.
    """
    try:
        request = GetCommentsRequest(post_id=post_id, page=page, limit=limit, sort=sort)
        return await get_comments_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.put("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Edit a comment's content.

    Only the author or an admin can edit. The previous content is kept in
    the edit history.
    """
    actor = require_actor(jwt_service, auth_token, authorization)

    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id, actor=actor, content=request.content
        )
        return await update_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and recount its post.

    Only the author or an admin can delete.
    """
    actor = require_actor(jwt_service, auth_token, authorization)

    try:
        use_case_request = DeleteCommentRequest(comment_id=comment_id, actor=actor)
        return await delete_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


async def _react(
    comment_id: str,
    reaction: ReactionType,
    use_case: ReactToCommentUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> ReactToCommentResponse:
    actor = require_actor(jwt_service, auth_token, authorization)

    try:
        use_case_request = ReactToCommentRequest(
            comment_id=comment_id, user_id=str(actor.user_id), reaction=reaction
        )
        return await use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/{comment_id}/like", response_model=ReactToCommentResponse)
async def like_comment(
    comment_id: str,
    react_use_case: FromDishka[ReactToCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ReactToCommentResponse:
    """Toggle a like. Liking removes an existing dislike."""
    return await _react(
        comment_id,
        ReactionType.LIKE,
        react_use_case,
        jwt_service,
        auth_token,
        authorization,
    )


@router.post("/{comment_id}/dislike", response_model=ReactToCommentResponse)
async def dislike_comment(
    comment_id: str,
    react_use_case: FromDishka[ReactToCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ReactToCommentResponse:
    """Toggle a dislike. Disliking removes an existing like."""
    return await _react(
        comment_id,
        ReactionType.DISLIKE,
        react_use_case,
        jwt_service,
        auth_token,
        authorization,
    )


@router.post("/{comment_id}/report", response_model=ReportCommentResponse)
async def report_comment(
    comment_id: str,
    request: ReportCommentAPIRequest,
    report_comment_use_case: FromDishka[ReportCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ReportCommentResponse:
    """Report a comment.

    Each user may report a comment once. Enough reports send the comment
    back to the moderation queue with a raised spam score.
    """
    actor = require_actor(jwt_service, auth_token, authorization)

    try:
        use_case_request = ReportCommentRequest(
            comment_id=comment_id, user_id=str(actor.user_id), reason=request.reason
        )
        return await report_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
