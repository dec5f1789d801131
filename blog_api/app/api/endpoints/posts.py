"""
Post endpoints.

Listing and reading posts is public; ``?admin=1`` additionally lists
drafts.  Creating, updating and deleting posts requires an administrator
token.  Create and update accept either a multipart form (the admin
panel, with an optional ``coverImage`` file) or a JSON object.

Reader comments on a post are submitted and listed under
``/posts/{post_id}/comments``; moderation lives in ``comments.py``.
"""

import logging
from typing import AsyncIterator, List, Optional, Tuple

from fastapi import APIRouter, Depends, Query, Request
from pydantic import ValidationError as SchemaError
from starlette.datastructures import UploadFile

from blog_api.app.api.deps import get_comment_service, get_post_service
from blog_api.app.core.errors import BlogError, InternalError, ValidationError
from blog_api.app.core.security import require_admin
from blog_api.app.schemas.base import SuccessResponse
from blog_api.app.schemas.comment import CommentCreate, CommentRead
from blog_api.app.schemas.post import PostFields, PostList, PostRead
from blog_api.app.services.comment_service import CommentService
from blog_api.app.services.post_service import PostService

logger = logging.getLogger(__name__)

router = APIRouter()

COVER_IMAGE_FIELD = "coverImage"
FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")

PostPayload = Tuple[PostFields, Optional[UploadFile]]


async def read_post_payload(request: Request) -> AsyncIterator[PostPayload]:
    """Parse post fields and the optional cover image from the request body.

    Repeated ``tags`` form fields are kept as a list; a single value is
    left for the service to split on commas.  Uploaded files are closed
    once the request has been handled.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        try:
            data = {key: value for key, value in form.multi_items() if not isinstance(value, UploadFile)}
            tags = [value for value in form.getlist("tags") if isinstance(value, str)]
            if len(tags) > 1:
                data["tags"] = tags
            upload = form.get(COVER_IMAGE_FIELD)
            image = upload if isinstance(upload, UploadFile) and upload.filename else None
            yield _validate_fields(data), image
        finally:
            await form.close()
        return

    body = await request.body()
    data = {}
    if body:
        try:
            data = await request.json()
        except ValueError:
            raise ValidationError("Malformed JSON body")
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
    yield _validate_fields(data), None


def _validate_fields(data: dict) -> PostFields:
    try:
        return PostFields.model_validate(data)
    except SchemaError as exc:
        raise ValidationError(f"Invalid post fields: {exc.errors()[0]['msg']}")


@router.get("", response_model=PostList)
async def list_posts(
    admin: Optional[str] = Query(None, description="Any non-empty value includes drafts"),
    service: PostService = Depends(get_post_service),
) -> PostList:
    """List posts newest first as a single page."""
    return await service.list_posts(admin_mode=bool(admin))


@router.get("/{post_id}", response_model=PostRead)
async def get_post(post_id: int, service: PostService = Depends(get_post_service)) -> PostRead:
    """Retrieve a single post; HTTP 404 if it does not exist."""
    return await service.get_post(post_id)


@router.post("", response_model=PostRead)
async def create_post(
    payload: PostPayload = Depends(read_post_payload),
    service: PostService = Depends(get_post_service),
    current_user: dict = Depends(require_admin),
) -> PostRead:
    """Create a post (admin only)."""
    fields, image = payload
    try:
        return await service.create_post(fields, image)
    except BlogError:
        raise
    except Exception as e:
        logger.exception("Failed to create post")
        raise InternalError(f"Failed to create post: {e}")


@router.put("/{post_id}", response_model=PostRead)
async def update_post(
    post_id: int,
    payload: PostPayload = Depends(read_post_payload),
    service: PostService = Depends(get_post_service),
    current_user: dict = Depends(require_admin),
) -> PostRead:
    """Sparse update of a post (admin only); empty fields are ignored."""
    fields, image = payload
    return await service.update_post(post_id, fields, image)


@router.delete("/{post_id}", response_model=SuccessResponse, response_model_exclude_none=True)
async def delete_post(
    post_id: int,
    service: PostService = Depends(get_post_service),
    current_user: dict = Depends(require_admin),
) -> SuccessResponse:
    """Delete a post and its cover image (admin only)."""
    await service.delete_post(post_id)
    return SuccessResponse()


@router.get("/{post_id}/comments", response_model=List[CommentRead])
async def list_post_comments(
    post_id: int,
    service: CommentService = Depends(get_comment_service),
) -> List[CommentRead]:
    """Approved comments of a post."""
    return await service.list_approved_for_post(post_id)


@router.post("/{post_id}/comments", response_model=SuccessResponse)
async def submit_comment(
    post_id: int,
    comment: Optional[CommentCreate] = None,
    service: CommentService = Depends(get_comment_service),
) -> SuccessResponse:
    """Submit a comment; it stays hidden until approved."""
    comment = comment or CommentCreate()
    return await service.submit(post_id, comment.author, comment.content)
