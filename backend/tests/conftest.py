from __future__ import annotations

import datetime as dt
import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

import findw.models  # noqa: E402,F401
from findw.core.config import Settings  # noqa: E402
from findw.core.security import SecurityContext, build_security_context  # noqa: E402
from findw.db.base import Base  # noqa: E402
from findw.db.session import build_engine, build_session_factory  # noqa: E402
from findw.main import create_app  # noqa: E402
from findw.models.user import User  # noqa: E402

START = dt.datetime(2026, 3, 1, 12, 0, 0, tzinfo=dt.timezone.utc)


class FakeClock:
    def __init__(self, start: dt.datetime = START) -> None:
        self.current = start

    def now(self) -> dt.datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current = self.current + dt.timedelta(**kwargs)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'findw.db'}",
        JWT_SECRET="test-secret-with-enough-entropy",
        VK_TOKEN_ENC_KEY="test-vk-token-key",
        PASSWORD_HASH_TIME_COST=1,
        PASSWORD_HASH_MEMORY_COST_KIB=1024,
        PASSWORD_HASH_PARALLELISM=1,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def security(settings: Settings, clock: FakeClock) -> SecurityContext:
    return build_security_context(settings, clock=clock)


@pytest.fixture()
def session_factory(settings: Settings) -> Iterator[sessionmaker[Session]]:
    engine = build_engine(settings)
    Base.metadata.create_all(engine)
    try:
        yield build_session_factory(engine)
    finally:
        engine.dispose()


@pytest.fixture()
def db(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def user(db: Session, security: SecurityContext) -> User:
    record = User(email="owner@x.test", password_hash=security.password_hasher.hash("pw"))
    db.add(record)
    db.commit()
    return record


@pytest.fixture()
def client(
    settings: Settings,
    security: SecurityContext,
    session_factory: sessionmaker[Session],
) -> Iterator[TestClient]:
    app = create_app(settings, security=security, session_factory=session_factory)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers(client: TestClient) -> Callable[[str], dict[str, str]]:
    """Register and log in ``email``; return its bearer header."""

    def _login(email: str = "a@x.test", password: str = "pw") -> dict[str, str]:
        client.post("/auth/register", json={"email": email, "password": password})
        response = client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login
