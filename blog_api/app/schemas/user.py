"""
Pydantic models for the administrator account and login.

The blog has a single administrator configured through settings; the
user record is registered in the store on first successful login.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class LoginRequest(CamelModel):
    username: Optional[str] = Field(None, examples=["admin"])
    password: Optional[str] = Field(None, examples=["s3cret"])


class UserRead(CamelModel):
    id: int
    username: str
    email: Optional[str] = None


class LoginResponse(CamelModel):
    success: bool = True
    message: str = "Login successful"
    token: str
    user: UserRead
