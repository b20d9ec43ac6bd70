"""Admin moderation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query
from pydantic import BaseModel

from blog.application.usecase.admin import (
    BulkModerateRequest,
    BulkModerateResponse,
    BulkModerateUseCase,
    GetDashboardRequest,
    GetDashboardResponse,
    GetDashboardUseCase,
    GetStatsRequest,
    GetStatsResponse,
    GetStatsUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    RecountPostRequest,
    RecountPostResponse,
    RecountPostUseCase,
    UpdateCommentStatusRequest,
    UpdateCommentStatusUseCase,
)
from blog.application.usecase.comment import ModeratedCommentItem
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.domain.value import CommentStatus, ModerationAction
from blog.interface.api.auth import require_admin_actor
from blog.interface.error import to_http_exception

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class UpdateStatusAPIRequest(BaseModel):
    """API request for moderating one comment."""

    status: CommentStatus


class BulkModerationAPIRequest(BaseModel):
    """API request for moderating many comments."""

    comment_ids: list[str]
    action: ModerationAction


@router.get("/comments", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    status: CommentStatus | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListCommentsResponse:
    """List comments across all posts, any status unless filtered."""
    actor = require_admin_actor(jwt_service, auth_token, authorization)

    try:
        request = ListCommentsRequest(
            actor=actor, status=status, page=page, limit=limit
        )
        return await list_comments_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/comments/moderation", response_model=ListCommentsResponse)
async def moderation_queue(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    status: CommentStatus = CommentStatus.PENDING,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListCommentsResponse:
    """Comments awaiting moderation, newest first."""
    actor = require_admin_actor(jwt_service, auth_token, authorization)

    try:
        request = ListCommentsRequest(
            actor=actor, status=status, page=page, limit=limit
        )
        return await list_comments_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.put("/comments/{comment_id}/status", response_model=ModeratedCommentItem)
async def update_comment_status(
    comment_id: str,
    request: UpdateStatusAPIRequest,
    update_status_use_case: FromDishka[UpdateCommentStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ModeratedCommentItem:
    """Approve, reject or mark a single comment as spam."""
    actor = require_admin_actor(jwt_service, auth_token, authorization)

    try:
        use_case_request = UpdateCommentStatusRequest(
            actor=actor, comment_id=comment_id, status=request.status
        )
        return await update_status_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/comments/bulk-moderation", response_model=BulkModerateResponse)
async def bulk_moderation(
    request: BulkModerationAPIRequest,
    bulk_moderate_use_case: FromDishka[BulkModerateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> BulkModerateResponse:
    """Apply one action to many comments.

    ``delete`` recounts every affected post from its remaining comments.
    """
    actor = require_admin_actor(jwt_service, auth_token, authorization)

    try:
        use_case_request = BulkModerateRequest(
            actor=actor, comment_ids=request.comment_ids, action=request.action
        )
        return await bulk_moderate_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/posts/{post_id}/recount", response_model=RecountPostResponse)
async def recount_post(
    post_id: str,
    recount_use_case: FromDishka[RecountPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> RecountPostResponse:
    """Recompute a post's comment count from its live comments."""
    actor = require_admin_actor(jwt_service, auth_token, authorization)

    try:
        return await recount_use_case.execute(
            RecountPostRequest(actor=actor, post_id=post_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/dashboard", response_model=GetDashboardResponse)
async def dashboard(
    dashboard_use_case: FromDishka[GetDashboardUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetDashboardResponse:
    """Site totals, recent activity and the most discussed posts."""
    actor = require_admin_actor(jwt_service, auth_token, authorization)

    try:
        return await dashboard_use_case.execute(GetDashboardRequest(actor=actor))
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/stats", response_model=GetStatsResponse)
async def stats(
    stats_use_case: FromDishka[GetStatsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetStatsResponse:
    """User, post and comment growth plus the moderation backlog."""
    actor = require_admin_actor(jwt_service, auth_token, authorization)

    try:
        return await stats_use_case.execute(GetStatsRequest(actor=actor))
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
