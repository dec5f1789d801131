"""
Newsletter endpoints.

Anyone may subscribe; the subscriber list is visible to administrators
only.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from blog_api.app.api.deps import get_subscriber_service
from blog_api.app.core.security import require_admin
from blog_api.app.schemas.base import SuccessResponse
from blog_api.app.schemas.subscriber import SubscribeRequest, SubscriberRead
from blog_api.app.services.subscriber_service import SubscriberService

router = APIRouter()


@router.post("/subscribe", response_model=SuccessResponse)
async def subscribe(
    data: Optional[SubscribeRequest] = Body(None),
    service: SubscriberService = Depends(get_subscriber_service),
) -> SuccessResponse:
    """Subscribe an e-mail address (400 if invalid, 409 if already present)."""
    return await service.subscribe((data or SubscribeRequest()).email)


@router.get("/subscribers", response_model=List[SubscriberRead])
async def list_subscribers(
    service: SubscriberService = Depends(get_subscriber_service),
    current_user: dict = Depends(require_admin),
) -> List[SubscriberRead]:
    return await service.list_subscribers()
