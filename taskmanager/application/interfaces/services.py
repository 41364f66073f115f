"""Service interfaces (ports) for credentials and tokens."""

from __future__ import annotations

from typing import Protocol


class IPasswordHasher(Protocol):
    """One-way, salted, slow password hash."""

    def hash(self, password: str) -> str:
        """Return a digest for password."""

    def verify(self, password: str, hashed_password: str) -> bool:
        """Return True if password matches; False (never raise) on malformed digest."""


class ITokenIssuer(Protocol):
    """Issues signed, time-bounded bearer tokens."""

    def issue(self, user_id: str, email: str) -> str:
        """Return a signed token carrying the user's identity."""
