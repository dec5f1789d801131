"""Pydantic models for newsletter subscriptions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class SubscribeRequest(CamelModel):
    # Only the presence of "@" is checked; see SubscriberService.subscribe.
    email: Optional[str] = Field(None, examples=["reader@example.com"])


class SubscriberRead(CamelModel):
    id: int
    email: str
    subscribed_at: datetime
