"""
Service layer for newsletter subscriptions.

Subscriptions are append-only; e-mail addresses are unique (exact
string comparison).  Validation is limited to the presence of an ``@``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from blog_api.app.core.errors import Conflict, ValidationError
from blog_api.app.core.store import BlogStore, utcnow
from blog_api.app.schemas.base import SuccessResponse
from blog_api.app.schemas.subscriber import SubscriberRead

logger = logging.getLogger(__name__)


class SubscriberService:
    def __init__(self, store: BlogStore) -> None:
        self.store = store

    async def subscribe(self, email: Optional[str]) -> SuccessResponse:
        """Add ``email`` to the newsletter list.

        Raises ``ValidationError`` for an empty address or one without
        ``@`` and ``Conflict`` if the address is already subscribed.
        """
        if not email or "@" not in email:
            raise ValidationError("Valid email required")
        with self.store.lock:
            if self.store.find_subscriber(email) is not None:
                logger.warning("Duplicate subscription attempt")
                raise Conflict("Email already subscribed")
            subscriber = SubscriberRead(
                id=self.store.next_id("subscribers"),
                email=email,
                subscribed_at=utcnow(),
            )
            self.store.subscribers.append(subscriber)
        logger.info("New subscriber %s", subscriber.id)
        return SuccessResponse(message="Successfully subscribed to newsletter")

    async def list_subscribers(self) -> List[SubscriberRead]:
        with self.store.lock:
            return [s.model_copy() for s in self.store.subscribers]
