"""
In-memory storage for the blog.

``BlogStore`` owns every collection (posts, comments, subscribers,
contacts, users), one monotonically increasing id counter per
collection and the static dashboard counters.  Nothing is persisted:
the store lives as long as the application that created it.

A single store is created by ``init_store`` when the application is
built and attached to ``app.state``; request handlers reach it through
the dependencies in ``api.deps`` rather than through module globals.
Mutations must run inside ``with store.lock:`` without awaiting, which
keeps each mutation atomic even when a service is called from a worker
thread.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..schemas.comment import CommentRead
from ..schemas.contact import ContactRead
from ..schemas.post import PostRead
from ..schemas.subscriber import SubscriberRead
from ..schemas.user import UserRead

logger = logging.getLogger(__name__)

COLLECTIONS = ("posts", "comments", "subscribers", "contacts", "users")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class StaticStats:
    """Dashboard counters that are not derived from the collections."""

    total_views: int = 5283
    total_comments: int = 137


class BlogStore:
    """Process-local container for all blog data."""

    def __init__(self, stats: Optional[StaticStats] = None) -> None:
        self.posts: List[PostRead] = []
        self.comments: List[CommentRead] = []
        self.subscribers: List[SubscriberRead] = []
        self.contacts: List[ContactRead] = []
        self.users: List[UserRead] = []
        self.stats = stats or StaticStats()
        self.lock = threading.RLock()
        self._counters: Dict[str, int] = {name: 0 for name in COLLECTIONS}

    def next_id(self, collection: str) -> int:
        """Allocate the next id for ``collection``.

        Ids are never handed out twice, even after deletions.
        """
        with self.lock:
            self._counters[collection] += 1
            return self._counters[collection]

    def find_post(self, post_id: int) -> Optional[PostRead]:
        return next((p for p in self.posts if p.id == post_id), None)

    def find_comment(self, comment_id: int) -> Optional[CommentRead]:
        return next((c for c in self.comments if c.id == comment_id), None)

    def find_subscriber(self, email: str) -> Optional[SubscriberRead]:
        return next((s for s in self.subscribers if s.email == email), None)

    def find_user(self, username: str) -> Optional[UserRead]:
        return next((u for u in self.users if u.username == username), None)

    def seed_sample_posts(self) -> None:
        """Add the two sample posts shown on a fresh blog."""
        samples = [
            {
                "title": "The Future of Web Development",
                "excerpt": "Exploring the latest trends in web development and what the future holds for developers.",
                "category": "technology",
                "tags": ["tech", "web development", "future"],
                "views": 284,
                "comments": 12,
                "created_at": datetime(2023, 6, 15, 10, 0, tzinfo=timezone.utc),
            },
            {
                "title": "10 Best Travel Destinations for 2023",
                "excerpt": "Discover the top travel destinations to add to your bucket list this year.",
                "category": "travel",
                "tags": ["travel", "destinations", "adventure"],
                "views": 512,
                "comments": 27,
                "created_at": datetime(2023, 6, 10, 10, 0, tzinfo=timezone.utc),
            },
        ]
        content = (
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Nullam euismod, "
            "nisl eget ultricies ultricies, nunc nisl aliquam nunc, eget aliquam nisl nunc eget nisl."
        )
        with self.lock:
            for sample in samples:
                self.posts.append(
                    PostRead(
                        id=self.next_id("posts"),
                        content=content,
                        updated_at=sample["created_at"],
                        **sample,
                    )
                )
        logger.info("Seeded %d sample posts", len(samples))


def init_store(seed: bool = True) -> BlogStore:
    """Create the application's store, optionally with sample posts."""
    store = BlogStore()
    if seed:
        store.seed_sample_posts()
    return store
