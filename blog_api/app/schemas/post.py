"""
Pydantic models for blog posts.

``PostRead`` is both the stored record and the response body.
``PostFields`` collects the loosely typed values submitted by the admin
form (multipart) or a JSON client; normalisation into ``PostRead``
values happens in ``PostService``.
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import Field

from .base import CamelModel


class PostRead(CamelModel):
    """A blog post as stored and returned by the API."""

    id: int
    title: Optional[str] = Field(None, examples=["The Future of Web Development"])
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = Field(None, examples=["technology"])
    tags: List[str] = Field(default_factory=list, examples=[["tech", "web development"]])
    comments_enabled: bool = True
    published: bool = True
    cover_image: Optional[str] = Field(None, examples=["/uploads/1686823200000-cover.png"])
    views: int = 0
    # Denormalised counter; not kept in sync with the comments collection.
    comments: int = 0
    created_at: datetime
    updated_at: datetime


class PostFields(CamelModel):
    """Raw post fields from a create or update request.

    Form submissions deliver every value as a string; JSON clients may
    send ``tags`` as a list and the flags as booleans.  All fields are
    optional so the same model serves sparse updates.
    """

    model_config = {**CamelModel.model_config, "extra": "ignore"}

    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[Union[List[str], str]] = None
    comments_enabled: Optional[Union[bool, str]] = None
    published: Optional[Union[bool, str]] = None


class PostList(CamelModel):
    """Listing envelope; pagination is fixed to a single page."""

    posts: List[PostRead]
    current_page: int = 1
    total_pages: int = 1
    total_posts: int
