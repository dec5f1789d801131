"""
Pydantic models for contact form messages.

Every field is required; presence is validated by ``ContactService``.
Messages are never marked as read by the API.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class ContactCreate(CamelModel):
    name: Optional[str] = Field(None, examples=["Jane Doe"])
    email: Optional[str] = Field(None, examples=["jane@example.com"])
    subject: Optional[str] = Field(None, examples=["Collaboration"])
    message: Optional[str] = None


class ContactRead(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    sent_at: datetime
    read: bool = False
