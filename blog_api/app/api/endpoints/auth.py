"""
Login endpoint.

Exchanges the administrator's username and password for a bearer
token used by the privileged endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from blog_api.app.api.deps import get_auth_service
from blog_api.app.schemas.user import LoginRequest, LoginResponse
from blog_api.app.services.auth_service import AuthService

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: Optional[LoginRequest] = Body(None),
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Authenticate the administrator and return a token."""
    credentials = credentials or LoginRequest()
    result = await service.login(credentials.username, credentials.password)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result
