"""AuthService unit tests with mocked repository, hasher and token issuer."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from taskmanager.application.dtos.user import UserCredentials, UserResult
from taskmanager.application.services.auth_service import AuthService, normalize_email
from taskmanager.domain.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
)


@pytest.fixture
def auth_mocks():
    """AuthService with mocked user_repo, a fake hasher and a fake token issuer."""
    user_repo = AsyncMock()
    user_repo.email_exists = AsyncMock(return_value=False)
    user_repo.create_user = AsyncMock(
        side_effect=lambda email, hashed_password, first_name, last_name: UserResult(
            id="u1", email=email, first_name=first_name, last_name=last_name
        )
    )
    hasher = MagicMock()
    hasher.hash = MagicMock(side_effect=lambda pw: f"hashed:{pw}")
    hasher.verify = MagicMock(side_effect=lambda pw, digest: digest == f"hashed:{pw}")
    issuer = MagicMock()
    issuer.issue = MagicMock(side_effect=lambda user_id, email: f"token:{user_id}")
    service = AuthService(user_repo, hasher, issuer)
    return service, user_repo, hasher, issuer


def test_normalize_email() -> None:
    assert normalize_email("  Alice@Example.COM ") == "alice@example.com"


async def test_register_creates_user_and_issues_token(auth_mocks) -> None:
    service, user_repo, hasher, issuer = auth_mocks
    result = await service.register("Alice@Example.com", "secret1", "Alice", "Smith")
    assert result.user_id == "u1"
    assert result.email == "alice@example.com"
    assert result.token == "token:u1"
    user_repo.email_exists.assert_awaited_once_with("alice@example.com")
    kwargs = user_repo.create_user.await_args.kwargs
    assert kwargs["hashed_password"] == "hashed:secret1"
    assert "secret1" not in kwargs.values()
    issuer.issue.assert_called_once_with("u1", "alice@example.com")


async def test_register_duplicate_email_raises(auth_mocks) -> None:
    service, user_repo, hasher, _ = auth_mocks
    user_repo.email_exists.return_value = True
    with pytest.raises(DuplicateEmailException):
        await service.register("alice@example.com", "secret1", "Alice", "Smith")
    user_repo.create_user.assert_not_awaited()
    hasher.hash.assert_not_called()


async def test_register_race_on_unique_constraint_raises(auth_mocks) -> None:
    """Repository signals the constraint violation; the service lets it through."""
    service, user_repo, _, issuer = auth_mocks
    user_repo.create_user.side_effect = DuplicateEmailException()
    with pytest.raises(DuplicateEmailException):
        await service.register("alice@example.com", "secret1", "Alice", "Smith")
    issuer.issue.assert_not_called()


async def test_login_success(auth_mocks) -> None:
    service, user_repo, _, issuer = auth_mocks
    user_repo.get_credentials_by_email = AsyncMock(
        return_value=UserCredentials(
            id="u1", email="alice@example.com", hashed_password="hashed:secret1"
        )
    )
    result = await service.login(" ALICE@example.com", "secret1")
    assert result.token == "token:u1"
    assert result.user_id == "u1"
    user_repo.get_credentials_by_email.assert_awaited_once_with("alice@example.com")


async def test_login_failures_are_indistinguishable(auth_mocks) -> None:
    """Unknown email and wrong password raise the same exception and message."""
    service, user_repo, hasher, issuer = auth_mocks
    user_repo.get_credentials_by_email = AsyncMock(return_value=None)
    with pytest.raises(InvalidCredentialsException) as unknown:
        await service.login("nobody@example.com", "secret1")
    # A dummy verify still runs for the unknown email.
    assert hasher.verify.call_count == 1

    user_repo.get_credentials_by_email = AsyncMock(
        return_value=UserCredentials(
            id="u1", email="alice@example.com", hashed_password="hashed:secret1"
        )
    )
    with pytest.raises(InvalidCredentialsException) as wrong:
        await service.login("alice@example.com", "not-it")

    assert str(unknown.value) == str(wrong.value) == "Invalid email or password"
    assert unknown.value.to_dict() == wrong.value.to_dict()
    issuer.issue.assert_not_called()
