"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a fixed-length
input so long passwords are not silently truncated.
"""

import base64
import hashlib

import bcrypt


def _prehash(password: str) -> bytes:
    """SHA-256 pre-hash to avoid bcrypt's 72-byte truncation."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password; False on a malformed digest."""
    try:
        result = bcrypt.checkpw(
            _prehash(plain_password),
            hashed_password.encode("utf-8"),
        )
        return bool(result)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Return bcrypt hash of password (SHA-256 pre-hashed before bcrypt)."""
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(_prehash(password), salt)
    return hashed.decode("utf-8")


class BcryptPasswordHasher:
    """IPasswordHasher backed by the functions above. CPU-bound: call off the event loop."""

    def hash(self, password: str) -> str:
        return get_password_hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        return verify_password(password, hashed_password)
