"""Report comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, ReportReason, UserId


class ReportCommentRequest(BaseModel):
    """Report comment request."""

    comment_id: str  # UUID string
    user_id: str  # Reporting user
    reason: ReportReason


class ReportCommentResponse(BaseModel):
    """Report comment response."""

    message: str
    comment_id: str


class ReportCommentUseCase:
    """Use case for reporting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ReportCommentRequest) -> ReportCommentResponse:
        """Record the report.

        Raises:
            NotFoundError: If the comment does not exist
            DuplicateReportError: If the user already reported this comment
        """
        await self.comment_service.report(
            CommentId(UUID(request.comment_id)),
            UserId(UUID(request.user_id)),
            request.reason,
        )
        return ReportCommentResponse(
            message="Comment reported successfully", comment_id=request.comment_id
        )
