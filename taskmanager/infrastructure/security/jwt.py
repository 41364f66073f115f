"""JWT token issuance and verification for authentication.

JwtTokenService is built once from settings (get_token_service) and is
immutable afterwards. Tokens carry sub (user id), email, iss, aud, iat, exp.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any, cast

from jose import JWTError, jwt

from taskmanager.core.config import get_settings
from taskmanager.domain.exceptions import AuthenticationException
from taskmanager.shared.utils.datetime import utc_now


@dataclass(frozen=True)
class TokenClaims:
    """Verified claims of a bearer token."""

    user_id: str
    email: str | None
    expires_at: datetime


class JwtTokenService:
    """Issue and verify HS256 (by default) bearer tokens bound to issuer and audience."""

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        issuer: str,
        audience: str,
        expire_minutes: int = 60,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._expire_minutes = expire_minutes

    def issue(self, user_id: str, email: str) -> str:
        """Create a signed token for user_id, valid for expire_minutes."""
        now = utc_now()
        claims: dict[str, Any] = {
            "sub": user_id,
            "email": email,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": now,
            "exp": now + timedelta(minutes=self._expire_minutes),
        }
        encoded = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        return cast(str, encoded)

    def verify(self, token: str) -> TokenClaims:
        """Verify signature, issuer, audience and expiry; return the claims.

        Raises:
            AuthenticationException: If the token is invalid, expired, issued
                for another issuer/audience, or missing sub.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            raise AuthenticationException("Invalid or expired token") from e
        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            raise AuthenticationException("Token missing required claim: sub")
        expires_at = datetime.fromtimestamp(payload["exp"], tz=UTC)
        return TokenClaims(
            user_id=user_id,
            email=payload.get("email"),
            expires_at=expires_at,
        )


@lru_cache
def get_token_service() -> JwtTokenService:
    """Return the process-wide token service built from settings.

    In tests, call get_token_service.cache_clear() together with
    get_settings.cache_clear() after changing env vars.
    """
    settings = get_settings()
    return JwtTokenService(
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expire_minutes=settings.access_token_expire_minutes,
    )
