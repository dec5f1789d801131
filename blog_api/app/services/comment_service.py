"""
Service layer for comments.

Readers submit comments which stay unapproved (and invisible) until an
administrator approves them.  The referenced post is not checked, so a
comment may point at a post that was deleted or never existed.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from blog_api.app.core.errors import NotFound, ValidationError
from blog_api.app.core.store import BlogStore, utcnow
from blog_api.app.schemas.base import SuccessResponse
from blog_api.app.schemas.comment import CommentApproval, CommentRead

logger = logging.getLogger(__name__)


class CommentService:
    """Submission and moderation of comments in a ``BlogStore``."""

    def __init__(self, store: BlogStore) -> None:
        self.store = store

    async def list_approved_for_post(self, post_id: int) -> List[CommentRead]:
        """Approved comments of a post in submission order."""
        with self.store.lock:
            return [
                c.model_copy()
                for c in self.store.comments
                if c.post_id == post_id and c.approved
            ]

    async def submit(self, post_id: int, author: Optional[str], content: Optional[str]) -> SuccessResponse:
        """Record a new, unapproved comment.

        The comment itself is not returned: it only becomes visible
        after moderation.
        """
        if not author or not content:
            raise ValidationError("Author and content are required")
        with self.store.lock:
            comment = CommentRead(
                id=self.store.next_id("comments"),
                post_id=post_id,
                author=author,
                content=content,
                approved=False,
                created_at=utcnow(),
            )
            self.store.comments.append(comment)
        logger.info("Comment %s submitted for post %s", comment.id, post_id)
        return SuccessResponse(message="Comment submitted for approval")

    async def list_all(self) -> List[CommentRead]:
        with self.store.lock:
            return [c.model_copy() for c in self.store.comments]

    async def approve(self, comment_id: int) -> CommentApproval:
        with self.store.lock:
            comment = self._require(comment_id)
            comment.approved = True
            result = comment.model_copy()
        logger.info("Approved comment %s", comment_id)
        return CommentApproval(comment=result)

    async def delete(self, comment_id: int) -> None:
        with self.store.lock:
            self.store.comments.remove(self._require(comment_id))
        logger.info("Deleted comment %s", comment_id)

    def _require(self, comment_id: int) -> CommentRead:
        comment = self.store.find_comment(comment_id)
        if comment is None:
            raise NotFound("Comment not found")
        return comment
