"""Ports (Protocols) the application layer depends on."""

from taskmanager.application.interfaces.repositories import (
    ITaskRepository,
    IUserRepository,
)
from taskmanager.application.interfaces.services import IPasswordHasher, ITokenIssuer

__all__ = [
    "IPasswordHasher",
    "ITaskRepository",
    "ITokenIssuer",
    "IUserRepository",
]
