"""Security: password hashing and bearer token service."""

from taskmanager.infrastructure.security.jwt import (
    JwtTokenService,
    TokenClaims,
    get_token_service,
)
from taskmanager.infrastructure.security.password import (
    BcryptPasswordHasher,
    get_password_hash,
    verify_password,
)

__all__ = [
    "BcryptPasswordHasher",
    "JwtTokenService",
    "TokenClaims",
    "get_password_hash",
    "get_token_service",
    "verify_password",
]
