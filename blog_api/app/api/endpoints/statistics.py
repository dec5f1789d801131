"""Dashboard statistics endpoint (admin only)."""

from fastapi import APIRouter, Depends

from blog_api.app.api.deps import get_statistics_service
from blog_api.app.core.security import require_admin
from blog_api.app.schemas.stats import StatsRead
from blog_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("/stats", response_model=StatsRead)
async def get_stats(
    service: StatisticsService = Depends(get_statistics_service),
    current_user: dict = Depends(require_admin),
) -> StatsRead:
    """Post, draft, view, subscriber and approved-comment counts."""
    return await service.overview()
