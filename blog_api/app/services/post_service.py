"""
Service layer for blog posts.

Provides listing, retrieval, creation, sparse update and deletion of
posts, including the lifecycle of each post's cover image: a stored
image belongs to exactly one post and is deleted when the post is
deleted or when a new image replaces it.

Form submissions deliver every value as a string, so tag lists and the
``commentsEnabled``/``published`` flags are normalised here:

* tags are split on commas and trimmed, empty entries are dropped;
* a flag is false only when the literal string ``"false"`` (or a JSON
  ``false``) is submitted, and true otherwise.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from starlette.concurrency import run_in_threadpool

from blog_api.app.core.errors import NotFound
from blog_api.app.core.store import BlogStore, utcnow
from blog_api.app.schemas.post import PostFields, PostList, PostRead
from blog_api.app.services.upload_service import Upload, UploadService

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("title", "content", "excerpt", "category")
FLAG_FIELDS = ("comments_enabled", "published")


def normalize_tags(value: Union[str, Iterable[str], None]) -> List[str]:
    """Turn ``"a, b,c"`` (or a list of strings) into ``["a", "b", "c"]``."""
    if value is None:
        return []
    items = value.split(",") if isinstance(value, str) else value
    return [tag.strip() for tag in items if tag and tag.strip()]


def parse_flag(value: Union[bool, str, None], default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return value != "false"


def _is_provided(value: object) -> bool:
    return value is not None and value != "" and value != []


class PostService:
    """CRUD operations over the posts of a ``BlogStore``."""

    def __init__(self, store: BlogStore, uploads: UploadService) -> None:
        self.store = store
        self.uploads = uploads

    async def list_posts(self, admin_mode: bool = False) -> PostList:
        """Return posts newest first.

        Drafts (``published`` false) are only included in admin mode.
        All matching posts are returned as a single page.
        """
        with self.store.lock:
            posts = [p for p in self.store.posts if admin_mode or p.published]
            posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
            snapshot = [p.model_copy(deep=True) for p in posts]
        return PostList(posts=snapshot, total_posts=len(snapshot))

    async def get_post(self, post_id: int) -> PostRead:
        with self.store.lock:
            return self._require(post_id).model_copy(deep=True)

    async def create_post(self, fields: PostFields, image: Optional[Upload] = None) -> PostRead:
        """Create a post, storing ``image`` as its cover if given.

        The image is validated and stored first, so a rejected upload
        never leaves a post behind.
        """
        cover_image = await self._store_image(image)
        try:
            now = utcnow()
            with self.store.lock:
                post = PostRead(
                    id=self.store.next_id("posts"),
                    title=fields.title,
                    content=fields.content,
                    excerpt=fields.excerpt,
                    category=fields.category,
                    tags=normalize_tags(fields.tags),
                    comments_enabled=parse_flag(fields.comments_enabled),
                    published=parse_flag(fields.published),
                    cover_image=cover_image,
                    views=0,
                    comments=0,
                    created_at=now,
                    updated_at=now,
                )
                self.store.posts.append(post)
                result = post.model_copy(deep=True)
        except Exception:
            self.uploads.delete(cover_image)
            raise
        logger.info("Created post %s (published=%s)", result.id, result.published)
        return result

    async def update_post(
        self,
        post_id: int,
        fields: PostFields,
        image: Optional[Upload] = None,
    ) -> PostRead:
        """Apply a sparse update to a post.

        Only fields that are present and non-empty overwrite the stored
        values.  A new image replaces the current cover and the previous
        file is deleted.  ``created_at`` is never touched.
        """
        if image is not None:
            # Fail before writing the file when the post does not exist.
            with self.store.lock:
                self._require(post_id)
        new_cover = await self._store_image(image)
        old_cover = None
        try:
            with self.store.lock:
                post = self._require(post_id)
                changes = {name: getattr(fields, name) for name in TEXT_FIELDS if _is_provided(getattr(fields, name))}
                if _is_provided(fields.tags):
                    changes["tags"] = normalize_tags(fields.tags)
                for name in FLAG_FIELDS:
                    value = getattr(fields, name)
                    if _is_provided(value):
                        changes[name] = parse_flag(value)
                if new_cover is not None:
                    old_cover = post.cover_image
                    changes["cover_image"] = new_cover
                changes["updated_at"] = utcnow()
                for name, value in changes.items():
                    setattr(post, name, value)
                result = post.model_copy(deep=True)
        except Exception:
            self.uploads.delete(new_cover)
            raise
        self.uploads.delete(old_cover)
        logger.info("Updated post %s (%s)", post_id, ", ".join(sorted(changes)))
        return result

    async def delete_post(self, post_id: int) -> None:
        """Delete a post together with its stored cover image."""
        with self.store.lock:
            post = self._require(post_id)
            self.uploads.delete(post.cover_image)
            self.store.posts.remove(post)
        logger.info("Deleted post %s", post_id)

    async def _store_image(self, image: Optional[Upload]) -> Optional[str]:
        """Save ``image`` in a worker thread and return its reference."""
        if image is None:
            return None
        return await run_in_threadpool(self.uploads.save_image, image)

    def _require(self, post_id: int) -> PostRead:
        post = self.store.find_post(post_id)
        if post is None:
            raise NotFound("Post not found")
        return post
