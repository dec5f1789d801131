"""Contact form endpoints: public submission, admin-only listing."""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from blog_api.app.api.deps import get_contact_service
from blog_api.app.core.security import require_admin
from blog_api.app.schemas.base import SuccessResponse
from blog_api.app.schemas.contact import ContactCreate, ContactRead
from blog_api.app.services.contact_service import ContactService

router = APIRouter()


@router.post("/contact", response_model=SuccessResponse)
async def send_contact(
    data: Optional[ContactCreate] = Body(None),
    service: ContactService = Depends(get_contact_service),
) -> SuccessResponse:
    return await service.submit(data or ContactCreate())


@router.get("/contacts", response_model=List[ContactRead])
async def list_contacts(
    service: ContactService = Depends(get_contact_service),
    current_user: dict = Depends(require_admin),
) -> List[ContactRead]:
    return await service.list_contacts()
