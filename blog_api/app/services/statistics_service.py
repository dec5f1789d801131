"""
Service layer for dashboard statistics.

Post, subscriber and comment figures are computed from the live
collections on every call.  ``total_views`` reports the store's static
counter unless ``live_views`` is enabled, in which case it is the sum
of the posts' view counters.
"""

from __future__ import annotations

from blog_api.app.core.store import BlogStore
from blog_api.app.schemas.stats import StatsRead


class StatisticsService:
    def __init__(self, store: BlogStore, live_views: bool = False) -> None:
        self.store = store
        self.live_views = live_views

    async def overview(self) -> StatsRead:
        with self.store.lock:
            published = sum(1 for p in self.store.posts if p.published)
            if self.live_views:
                total_views = sum(p.views for p in self.store.posts)
            else:
                total_views = self.store.stats.total_views
            return StatsRead(
                total_posts=published,
                total_drafts=len(self.store.posts) - published,
                total_views=total_views,
                total_subscribers=len(self.store.subscribers),
                total_comments=sum(1 for c in self.store.comments if c.approved),
            )
