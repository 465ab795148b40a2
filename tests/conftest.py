# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

from devconnector.core.security import create_access_token, gravatar_url, hash_password
from devconnector.db.session import Base
from devconnector.db.session import SessionLocal as AppSessionLocal
from devconnector.db.session import get_db as app_get_session
from devconnector.main import app as fastapi_app
from devconnector.models import Post, User
from devconnector.repositories.post_repo import PostRepository
from devconnector.services.post_service import PostService

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "secret123"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def expiring_session(app: FastAPI, engine: Engine, db_session: Session) -> Iterator[Session]:
    """Serve requests from a session built like the app's own.

    Objects expire on commit and are reloaded on next access, unlike the
    shared ``db_session``.
    """
    session = AppSessionLocal(bind=engine)

    def _get_session_override() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture(scope="session")
def password_hash() -> str:
    """Hash the shared test password once; bcrypt is deliberately slow."""
    return hash_password(TEST_PASSWORD)


@pytest.fixture()
def make_user(db_session: Session, password_hash: str) -> Callable[..., User]:
    """Return a factory persisting users with the shared test password."""

    def _make_user(name: str, email: str) -> User:
        user = User(
            name=name,
            email=email,
            password=password_hash,
            avatar=gravatar_url(email),
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def test_user(make_user: Callable[..., User]) -> User:
    """Create and return a persisted test user."""
    return make_user("Test User", "test@example.com")


@pytest.fixture()
def other_user(make_user: Callable[..., User]) -> User:
    """Create and return a second persisted user."""
    return make_user("Other User", "other@example.com")


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    token = create_access_token(test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    token = create_access_token(other_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def post_service(db_session: Session) -> PostService:
    """Return a post service bound to the test session."""
    return PostService(PostRepository(db_session))


@pytest.fixture()
def test_post(post_service: PostService, test_user: User) -> Post:
    """Create a baseline post authored by the primary test user."""
    return post_service.create_post(test_user.id, "Test post content")
