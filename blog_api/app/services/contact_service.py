"""Service layer for contact form messages."""

from __future__ import annotations

import logging
from typing import List

from blog_api.app.core.errors import ValidationError
from blog_api.app.core.store import BlogStore, utcnow
from blog_api.app.schemas.base import SuccessResponse
from blog_api.app.schemas.contact import ContactCreate, ContactRead

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self, store: BlogStore) -> None:
        self.store = store

    async def submit(self, data: ContactCreate) -> SuccessResponse:
        """Store a contact message; every field must be non-empty."""
        if not (data.name and data.email and data.subject and data.message):
            raise ValidationError("All fields are required")
        with self.store.lock:
            contact = ContactRead(
                id=self.store.next_id("contacts"),
                name=data.name,
                email=data.email,
                subject=data.subject,
                message=data.message,
                sent_at=utcnow(),
                read=False,
            )
            self.store.contacts.append(contact)
        logger.info("Contact message %s received", contact.id)
        return SuccessResponse(message="Your message has been sent successfully")

    async def list_contacts(self) -> List[ContactRead]:
        with self.store.lock:
            return [c.model_copy() for c in self.store.contacts]
