"""
Comment moderation endpoints (admin only).

Readers submit comments through ``/posts/{post_id}/comments``; these
routes list every comment regardless of approval and let an
administrator approve or delete them.
"""

from typing import List

from fastapi import APIRouter, Depends

from blog_api.app.api.deps import get_comment_service
from blog_api.app.core.security import require_admin
from blog_api.app.schemas.base import SuccessResponse
from blog_api.app.schemas.comment import CommentApproval, CommentRead
from blog_api.app.services.comment_service import CommentService

router = APIRouter()


@router.get("", response_model=List[CommentRead])
async def list_comments(
    service: CommentService = Depends(get_comment_service),
    current_user: dict = Depends(require_admin),
) -> List[CommentRead]:
    return await service.list_all()


@router.put("/{comment_id}/approve", response_model=CommentApproval)
async def approve_comment(
    comment_id: int,
    service: CommentService = Depends(get_comment_service),
    current_user: dict = Depends(require_admin),
) -> CommentApproval:
    """Make a comment visible on its post."""
    return await service.approve(comment_id)


@router.delete("/{comment_id}", response_model=SuccessResponse, response_model_exclude_none=True)
async def delete_comment(
    comment_id: int,
    service: CommentService = Depends(get_comment_service),
    current_user: dict = Depends(require_admin),
) -> SuccessResponse:
    await service.delete(comment_id)
    return SuccessResponse()
