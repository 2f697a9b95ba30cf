"""Pytest configuration and shared fixtures."""

import os

# Settings are read when the app module is imported
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")

from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from usahaku_navigator.cache import get_cache
from usahaku_navigator.config import Settings
from usahaku_navigator.exceptions import AuthProviderException
from usahaku_navigator.main import app as fastapi_app
from usahaku_navigator.models.learning import AudiobookRow, AuthenticatedUser, CourseRow
from usahaku_navigator.routers import health_router, learning_router


class FakeAuthResolver:
    """AuthResolver returning a fixed user, or raising a fixed error."""

    def __init__(self, user: AuthenticatedUser | None = None, error: Exception | None = None):
        self.user = user
        self.error = error
        self.calls = 0

    async def get_user(self) -> AuthenticatedUser | None:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.user


class FakeLearningStore:
    """In-memory stand-in for the Supabase audiobook and course stores."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.play_calls: list[str] = []
        self.progress_calls: list[tuple[str, float]] = []
        self.audiobooks: list[AudiobookRow] = []
        self.courses: list[CourseRow] = []
        self.audiobooks_error: Exception | None = None
        self.courses_error: Exception | None = None

    async def increment_play_count(self, audiobook_id: str) -> None:
        self.play_calls.append(audiobook_id)
        if self.error is not None:
            raise self.error

    async def update_course_progress(self, course_id: str, progress: float) -> None:
        self.progress_calls.append((course_id, progress))
        if self.error is not None:
            raise self.error

    async def get_audiobooks_by_user_id(self, user_id: str) -> list[AudiobookRow]:
        if self.audiobooks_error is not None:
            raise self.audiobooks_error
        return [row for row in self.audiobooks if row.user_id == user_id]

    async def get_courses_by_user_id(self, user_id: str) -> list[CourseRow]:
        if self.courses_error is not None:
            raise self.courses_error
        return [row for row in self.courses if row.user_id == user_id]


@pytest.fixture
def user():
    """Authenticated Supabase user."""
    return AuthenticatedUser(id="user-1", email="pemilik@usahaku.id", role="authenticated")


@pytest.fixture
def auth(user):
    """Auth resolver with a valid session."""
    return FakeAuthResolver(user=user)


@pytest.fixture
def anonymous_auth():
    """Auth resolver without a session."""
    return FakeAuthResolver(user=None)


@pytest.fixture
def failing_auth():
    """Auth resolver whose provider cannot be reached."""
    return FakeAuthResolver(error=AuthProviderException("Auth provider request failed: connection refused"))


@pytest.fixture
def store():
    """Learning store that records calls."""
    return FakeLearningStore()


@pytest.fixture
def failing_store():
    """Learning store whose backend is down."""
    return FakeLearningStore(error=Exception("db down"))


@pytest.fixture(autouse=True)
def reset_app_state():
    """Clear dependency overrides, rate limits and cached probes between tests."""
    learning_router.limiter.reset()
    health_router.limiter.reset()
    get_cache()._cache.clear()
    yield
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for Supabase calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.request = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def mock_settings():
    """Settings instance with test values."""
    return Settings(
        api_host="0.0.0.0",
        api_port=8000,
        supabase_url="https://test-project.supabase.co/",
        supabase_anon_key="test-anon-key",
        supabase_timeout=5.0,
    )


@pytest.fixture
def make_response():
    """Factory for real httpx.Response objects bound to a request, so raise_for_status works."""

    def _make(status_code: int, method: str = "GET", url: str = "https://test-project.supabase.co", **kwargs):
        return httpx.Response(status_code, request=httpx.Request(method, url), **kwargs)

    return _make
