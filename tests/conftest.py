"""Pytest configuration and fixtures."""

import os
import tempfile
from collections.abc import Generator
from typing import Any

# Settings are read once, so the test environment must be in place before lms is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("COOKIE_SECURE", "false")
os.environ.setdefault("MEDIA_ROOT", tempfile.mkdtemp(prefix="lms-media-"))

import fakeredis
import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from redis import Redis
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lms import models
from lms.cache import get_cache
from lms.config import Settings
from lms.core import container
from lms.database import Base, get_db
from lms.infrastructure.common.services.media_storage import LocalMediaStorage
from lms.infrastructure.identity.auth.password_service import PasswordService
from lms.infrastructure.identity.auth.token_service import TokenService
from lms.infrastructure.identity.services.session_store import RedisSessionStore
from lms.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"

# One shared connection, so every thread sees the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_PASSWORD = "password123"  # noqa: S105

# 1x1 transparent PNG
PNG_DATA_URL = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)

password_service = PasswordService()
token_service = TokenService()


class RecordingMailService:
    """Mail service double that keeps every message instead of sending it."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []

    def send(self, email: str, subject: str, template: str, data: dict[str, Any]) -> bool:
        self.sent.append({"email": email, "subject": subject, "template": template, "data": data})
        return True

    def sent_to(self, email: str, template: str | None = None) -> list[dict[str, Any]]:
        return [
            message
            for message in self.sent
            if message["email"] == email and (template is None or message["template"] == template)
        ]


def create_test_user(
    db_session: Session,
    email: str = "student@example.com",
    name: str = "Test Student",
    role: str = "user",
    is_verified: bool = True,
    password: str | None = TEST_PASSWORD,
) -> models.User:
    """Create a user directly in the database."""
    user = models.User(
        name=name,
        email=email,
        hashed_password=password_service.hash_password(password) if password else None,
        role=role,
        is_verified=is_verified,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def create_test_course(
    db_session: Session,
    name: str = "Python Fundamentals",
    price: float = 49.0,
    content_titles: tuple[str, ...] = ("Introduction", "Variables"),
) -> models.Course:
    """Create a course with content items directly in the database."""
    course = models.Course(
        name=name,
        description="Learn Python from scratch",
        price=price,
        estimated_price=79.0,
        thumbnail={"public_id": "courses/existing.png", "url": "/media/courses/existing.png"},
        tags="python,programming",
        level="Beginner",
        demo_url="https://videos.example.com/demo",
        benefits=[{"title": "Write real programs"}],
        prerequisites=[{"title": "A computer"}],
        course_data=[
            models.CourseContent(
                position=position,
                title=title,
                description=f"{title} lesson",
                video_url=f"https://videos.example.com/{position}",
                video_section="Basics",
                video_length=10,
                video_player_url="https://player.example.com",
                links=[{"title": "Docs", "url": "https://docs.python.org"}],
                suggestions="Take notes",
            )
            for position, title in enumerate(content_titles)
        ],
    )
    db_session.add(course)
    db_session.commit()
    db_session.refresh(course)
    return course


def enroll_user(db_session: Session, user: models.User, course: models.Course) -> None:
    db_session.add(models.Enrollment(user_id=user.id, course_id=course.id))
    db_session.commit()


def auth_headers(user: models.User, cache: Redis) -> dict[str, str]:
    """Cache a session for the user and return a bearer header for it."""
    RedisSessionStore(cache).save(user)
    return {"Authorization": f"Bearer {token_service.create_access_token(user.id)}"}


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def cache() -> Redis:
    """In-memory Redis replacement, fresh for each test."""
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def mail_service() -> Generator[RecordingMailService, None, None]:
    mail = RecordingMailService()
    container.mail_service.override(providers.Object(mail))
    yield mail
    container.mail_service.reset_override()


@pytest.fixture
def media_storage(tmp_path: Any) -> Generator[LocalMediaStorage, None, None]:
    storage = LocalMediaStorage(Settings(MEDIA_ROOT=tmp_path))
    container.media_storage.override(providers.Object(storage))
    yield storage
    container.media_storage.reset_override()


@pytest.fixture
def client(
    db_session: Session,
    cache: Redis,
    mail_service: RecordingMailService,
    media_storage: LocalMediaStorage,
) -> Generator[TestClient, Any, None]:
    """Create a test client with database session, fake Redis and recording mail."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = lambda: cache

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    return create_test_user(db_session)


@pytest.fixture
def test_admin(db_session: Session) -> models.User:
    return create_test_user(db_session, email="admin@example.com", name="Admin User", role="admin")


@pytest.fixture
def user_headers(test_user: models.User, cache: Redis) -> dict[str, str]:
    return auth_headers(test_user, cache)


@pytest.fixture
def admin_headers(test_admin: models.User, cache: Redis) -> dict[str, str]:
    return auth_headers(test_admin, cache)


@pytest.fixture
def test_course(db_session: Session) -> models.Course:
    return create_test_course(db_session)


@pytest.fixture
def enrolled_user(
    db_session: Session, test_user: models.User, test_course: models.Course
) -> models.User:
    enroll_user(db_session, test_user, test_course)
    db_session.refresh(test_user)
    return test_user
