"""JwtTokenService: issue/verify with issuer, audience and expiry."""

from datetime import timedelta

import pytest
from jose import jwt

from taskmanager.domain.exceptions import AuthenticationException
from taskmanager.infrastructure.security.jwt import JwtTokenService
from taskmanager.shared.utils.datetime import utc_now

SECRET = "unit-test-secret"


def _service(**overrides) -> JwtTokenService:
    kwargs = {
        "algorithm": "HS256",
        "issuer": "TaskManager",
        "audience": "TaskManager",
        "expire_minutes": 60,
    }
    kwargs.update(overrides)
    secret = kwargs.pop("secret", SECRET)
    return JwtTokenService(secret, **kwargs)


def test_issue_then_verify_returns_subject_and_email() -> None:
    svc = _service()
    token = svc.issue("user-1", "a@example.com")
    claims = svc.verify(token)
    assert claims.user_id == "user-1"
    assert claims.email == "a@example.com"
    assert claims.expires_at > utc_now()


def test_token_carries_issuer_audience_and_expiry() -> None:
    token = _service(expire_minutes=5).issue("user-1", "a@example.com")
    payload = jwt.get_unverified_claims(token)
    assert payload["sub"] == "user-1"
    assert payload["iss"] == "TaskManager"
    assert payload["aud"] == "TaskManager"
    assert payload["exp"] - payload["iat"] == 300


def test_wrong_secret_is_rejected() -> None:
    token = _service(secret="other-secret").issue("user-1", "a@example.com")
    with pytest.raises(AuthenticationException):
        _service().verify(token)


def test_wrong_audience_is_rejected() -> None:
    token = _service(audience="SomeoneElse").issue("user-1", "a@example.com")
    with pytest.raises(AuthenticationException):
        _service().verify(token)


def test_wrong_issuer_is_rejected() -> None:
    token = _service(issuer="SomeoneElse").issue("user-1", "a@example.com")
    with pytest.raises(AuthenticationException):
        _service().verify(token)


def test_expired_token_is_rejected() -> None:
    now = utc_now()
    token = jwt.encode(
        {
            "sub": "user-1",
            "iss": "TaskManager",
            "aud": "TaskManager",
            "iat": now - timedelta(hours=2),
            "exp": now - timedelta(hours=1),
        },
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(AuthenticationException):
        _service().verify(token)


def test_missing_subject_is_rejected() -> None:
    now = utc_now()
    token = jwt.encode(
        {
            "iss": "TaskManager",
            "aud": "TaskManager",
            "exp": now + timedelta(minutes=5),
        },
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(AuthenticationException):
        _service().verify(token)


def test_garbage_is_rejected() -> None:
    with pytest.raises(AuthenticationException):
        _service().verify("not.a.token")


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        _service(secret="")
