"""
Pydantic models for post comments.

Comments are submitted by readers and stay hidden until an
administrator approves them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class CommentCreate(CamelModel):
    """Body of a comment submission.

    Presence of ``author`` and ``content`` is checked by the service so
    that missing fields produce the API's own error message.
    """

    author: Optional[str] = Field(None, examples=["Jane"])
    content: Optional[str] = Field(None, examples=["Great article!"])


class CommentRead(CamelModel):
    id: int
    post_id: int
    author: str
    content: str
    approved: bool = False
    created_at: datetime


class CommentApproval(CamelModel):
    """Response of the moderation endpoint."""

    success: bool = True
    comment: CommentRead
