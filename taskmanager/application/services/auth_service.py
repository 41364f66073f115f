"""Authentication application service: register and login issuing bearer tokens."""

from __future__ import annotations

import asyncio
import logging

from taskmanager.application.dtos.user import AuthResult
from taskmanager.application.interfaces.repositories import IUserRepository
from taskmanager.application.interfaces.services import IPasswordHasher, ITokenIssuer
from taskmanager.domain.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
)

logger = logging.getLogger(__name__)

# Digest verified against when the email is unknown, so that branch costs one
# bcrypt verify like the wrong-password branch. Computed on first use.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash(hasher: IPasswordHasher) -> str:
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(hasher.hash, "not-a-real-password")
    return _dummy_hash_cache


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup: stripped and lower-cased."""
    return email.strip().lower()


class AuthService:
    """Register users and verify credentials. Plaintext passwords are never stored or logged."""

    def __init__(
        self,
        user_repo: IUserRepository,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
    ) -> None:
        self.user_repo = user_repo
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> AuthResult:
        """Create the account and return a token bound to its new id.

        Caller must run this within a single DB transaction. The unique
        constraint on email is the final authority: a concurrent registration
        that passes the existence check still fails with DuplicateEmailException.
        """
        email = normalize_email(email)
        if await self.user_repo.email_exists(email):
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmailException()
        hashed = await asyncio.to_thread(self.password_hasher.hash, password)
        user = await self.user_repo.create_user(
            email=email,
            hashed_password=hashed,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
        )
        logger.info("User registered: user_id=%s", user.id)
        token = self.token_issuer.issue(user.id, user.email)
        return AuthResult(token=token, email=user.email, user_id=user.id)

    async def login(self, email: str, password: str) -> AuthResult:
        """Return a fresh token, or raise InvalidCredentialsException.

        Unknown email and wrong password are indistinguishable to the caller.
        """
        email = normalize_email(email)
        credentials = await self.user_repo.get_credentials_by_email(email)
        if credentials is None:
            dummy_hash = await _get_dummy_hash(self.password_hasher)
            await asyncio.to_thread(self.password_hasher.verify, password, dummy_hash)
            logger.info("Login failed")
            raise InvalidCredentialsException()
        if not await asyncio.to_thread(
            self.password_hasher.verify, password, credentials.hashed_password
        ):
            logger.info("Login failed")
            raise InvalidCredentialsException()
        logger.info("User logged in: user_id=%s", credentials.id)
        token = self.token_issuer.issue(credentials.id, credentials.email)
        return AuthResult(token=token, email=credentials.email, user_id=credentials.id)
