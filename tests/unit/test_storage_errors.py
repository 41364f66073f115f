"""Connection-level driver errors surface as StorageUnavailableException."""

import asyncio

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from taskmanager.domain.exceptions import StorageUnavailableException
from taskmanager.infrastructure.persistence import database
from taskmanager.infrastructure.persistence.database import translate_storage_errors


def test_operational_error_is_translated() -> None:
    with pytest.raises(StorageUnavailableException) as exc_info:
        with translate_storage_errors():
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
    assert exc_info.value.details == {"reason": "OperationalError"}
    assert isinstance(exc_info.value.__cause__, OperationalError)


def test_timeout_is_translated() -> None:
    with pytest.raises(StorageUnavailableException):
        with translate_storage_errors():
            raise asyncio.TimeoutError()


def test_integrity_error_passes_through() -> None:
    with pytest.raises(IntegrityError):
        with translate_storage_errors():
            raise IntegrityError("INSERT", {}, Exception("unique violation"))


class _FlakySession:
    """Session stand-in whose connection() fails a set number of times."""

    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.connect_calls = 0
        self.rollbacks = 0

    async def __aenter__(self) -> "_FlakySession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None

    async def connection(self) -> object:
        self.connect_calls += 1
        if self.connect_calls <= self.failures:
            raise OperationalError("connect", {}, Exception("connection refused"))
        return object()

    async def rollback(self) -> None:
        self.rollbacks += 1


@pytest.fixture
def flaky_session(monkeypatch):
    """Install a flaky session as the session factory; sleeps are recorded, not taken."""
    delays: list[float] = []

    async def _no_sleep(delay: float) -> None:
        delays.append(delay)

    monkeypatch.setattr(database.asyncio, "sleep", _no_sleep)

    def _install(failures: int) -> _FlakySession:
        session = _FlakySession(failures)
        monkeypatch.setattr(database, "AsyncSessionLocal", lambda: session)
        return session

    return _install, delays


async def test_get_db_retries_transient_connect_failures(flaky_session) -> None:
    install, delays = flaky_session
    session = install(failures=2)
    gen = database.get_db()
    assert await gen.__anext__() is session
    await gen.aclose()
    assert session.connect_calls == 3
    assert session.rollbacks == 2
    assert delays == [0.5, 1.0]


async def test_get_db_gives_up_after_last_attempt(flaky_session) -> None:
    install, delays = flaky_session
    session = install(failures=5)
    with pytest.raises(StorageUnavailableException):
        await database.get_db().__anext__()
    assert session.connect_calls == 3
    assert len(delays) == 2
