"""Auth and token dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from taskmanager.application.services.auth_service import AuthService
from taskmanager.domain.exceptions import AuthenticationException
from taskmanager.infrastructure.persistence.database import get_db, get_db_transactional
from taskmanager.infrastructure.persistence.repositories import UserRepository
from taskmanager.infrastructure.security.jwt import JwtTokenService, get_token_service
from taskmanager.infrastructure.security.password import BcryptPasswordHasher

_http_bearer = HTTPBearer(auto_error=False)


def get_jwt_service() -> JwtTokenService:
    """Process-wide token service (composition root)."""
    return get_token_service()


async def get_current_user_id(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(_http_bearer)
    ],
    token_service: Annotated[JwtTokenService, Depends(get_jwt_service)],
) -> str:
    """Return the user id from a valid bearer token; 401 otherwise.

    Only the token is checked (signature, issuer, audience, expiry); no
    database lookup, so task routes open exactly one session per request.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        claims = token_service.verify(credentials.credentials)
    except AuthenticationException:
        raise HTTPException(
            status_code=401,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None
    return claims.user_id


async def get_auth_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    token_service: Annotated[JwtTokenService, Depends(get_jwt_service)],
) -> AuthService:
    """Auth service for login (read-only session)."""
    return AuthService(UserRepository(db), BcryptPasswordHasher(), token_service)


async def get_auth_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    token_service: Annotated[JwtTokenService, Depends(get_jwt_service)],
) -> AuthService:
    """Auth service for registration (transactional)."""
    return AuthService(UserRepository(db), BcryptPasswordHasher(), token_service)
