"""DTOs for user and auth use cases (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResult:
    """User read-model. No password hash."""

    id: str
    email: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class UserCredentials:
    """User id, email and stored hash; only the auth service sees this."""

    id: str
    email: str
    hashed_password: str


@dataclass(frozen=True)
class AuthResult:
    """Result of register and login: bearer token and public identity."""

    token: str
    email: str
    user_id: str
