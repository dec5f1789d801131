"""
Top-level API router.

Aggregates the domain routers; ``main.create_app`` mounts it under
``/api``.  Routers without a prefix define their full paths
themselves (e.g. ``/subscribe`` and ``/subscribers``).
"""

from fastapi import APIRouter

from .endpoints import auth, comments, contacts, posts, statistics, subscribers

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(statistics.router, tags=["statistics"])
router.include_router(posts.router, prefix="/posts", tags=["posts"])
router.include_router(comments.router, prefix="/comments", tags=["comments"])
router.include_router(subscribers.router, tags=["subscribers"])
router.include_router(contacts.router, tags=["contacts"])
