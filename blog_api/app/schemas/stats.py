"""Pydantic model for the administrator dashboard figures."""

from .base import CamelModel


class StatsRead(CamelModel):
    """Aggregated counters returned by ``GET /api/stats``."""

    total_posts: int
    total_drafts: int
    total_views: int
    total_subscribers: int
    total_comments: int
