"""
FastAPI Dependencies
Authenticated user resolution
"""
from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status, Header

from core.exceptions import AuthenticationException
from infrastructure.security.jwt_service import JwtService
from .container import get_jwt_service


async def get_current_user_id(
    authorization: Optional[str] = Header(None),
    jwt_service: JwtService = Depends(get_jwt_service)
) -> UUID:
    """
    Get current authenticated user id from JWT token

    Usage:
        @router.get("/protected")
        async def protected_route(user_id: UUID = Depends(get_current_user_id)):
            ...
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Extract token from "Bearer <token>"
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return jwt_service.user_id_from_token(parts[1])
    except AuthenticationException:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
