"""
JWT Service Implementation
Verifies access tokens issued by the auth service (shared HS256 secret)
"""
from datetime import datetime, timedelta, timezone
from typing import Dict
from uuid import UUID

from jose import jwt, JWTError
from loguru import logger

from core.config import settings
from core.exceptions import AuthenticationException


class JwtService:
    """JWT service for access tokens"""

    def __init__(self, secret_key: str = None, algorithm: str = None):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM

    def create_access_token(self, user_id: UUID) -> str:
        """Create access token"""
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

        payload = {
            "sub": str(user_id),
            "exp": expire,
            "iat": now,
            "type": "access"
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict:
        """Verify and decode token"""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT verification failed: {str(e)}")
            raise AuthenticationException("Invalid or expired token")

    def user_id_from_token(self, token: str) -> UUID:
        """Extract the authenticated user id (``sub``) from an access token"""
        payload = self.verify_token(token)
        if payload.get("type", "access") != "access":
            raise AuthenticationException("Invalid token type")

        subject = payload.get("sub")
        try:
            return UUID(str(subject))
        except (TypeError, ValueError):
            logger.warning(f"JWT carried an invalid subject: {subject!r}")
            raise AuthenticationException("Invalid token subject")
