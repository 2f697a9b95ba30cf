"""Tests for dependency injection functions."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient

from usahaku_navigator.dependencies import (
    get_audiobook_store,
    get_auth_resolver,
    get_course_store,
    get_http_client,
)
from usahaku_navigator.services.learning_audiobooks_service import SupabaseAudiobookStore
from usahaku_navigator.services.learning_courses_service import SupabaseCourseStore
from usahaku_navigator.services.supabase_auth_service import SupabaseAuthResolver


class TestDependencies:
    """Tests for dependency injection functions."""

    @pytest.mark.asyncio
    async def test_get_http_client(self):
        mock_request = MagicMock()
        mock_client = AsyncMock(spec=AsyncClient)
        mock_request.app.state.http_client = mock_client

        assert await get_http_client(mock_request) == mock_client

    @pytest.mark.asyncio
    async def test_get_http_client_not_initialized(self):
        mock_request = MagicMock()
        mock_request.app.state.http_client = None

        with pytest.raises(RuntimeError):
            await get_http_client(mock_request)

    @pytest.mark.asyncio
    async def test_get_auth_resolver(self, mock_http_client, mock_settings):
        resolver = await get_auth_resolver(mock_http_client, "token-abc", mock_settings)

        assert isinstance(resolver, SupabaseAuthResolver)
        assert resolver.access_token == "token-abc"
        assert resolver.settings is mock_settings

    @pytest.mark.asyncio
    async def test_get_stores(self, mock_http_client, mock_settings):
        audiobooks = await get_audiobook_store(mock_http_client, "token-abc", mock_settings)
        courses = await get_course_store(mock_http_client, None, mock_settings)

        assert isinstance(audiobooks, SupabaseAudiobookStore)
        assert audiobooks.access_token == "token-abc"
        assert isinstance(courses, SupabaseCourseStore)
        assert courses.access_token == ""
