"""Password hashing: bcrypt over a SHA-256 pre-hash."""

from taskmanager.infrastructure.security.password import (
    BcryptPasswordHasher,
    get_password_hash,
    verify_password,
)


def test_hash_is_salted_and_verifies() -> None:
    first = get_password_hash("s3cret!")
    second = get_password_hash("s3cret!")
    assert first != second
    assert first != "s3cret!"
    assert verify_password("s3cret!", first)
    assert verify_password("s3cret!", second)


def test_wrong_password_does_not_verify() -> None:
    digest = get_password_hash("s3cret!")
    assert not verify_password("S3cret!", digest)


def test_long_passwords_are_not_truncated() -> None:
    """bcrypt alone ignores bytes past 72; the pre-hash keeps them significant."""
    base = "x" * 80
    digest = get_password_hash(base + "a")
    assert verify_password(base + "a", digest)
    assert not verify_password(base + "b", digest)


def test_malformed_digest_returns_false() -> None:
    assert verify_password("anything", "not-a-bcrypt-digest") is False
    assert verify_password("anything", "") is False


def test_hasher_adapter() -> None:
    hasher = BcryptPasswordHasher()
    digest = hasher.hash("pw-123456")
    assert hasher.verify("pw-123456", digest)
    assert not hasher.verify("pw-1234567", digest)
