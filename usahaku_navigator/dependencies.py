"""FastAPI dependencies for dependency injection."""

import httpx
from fastapi import Depends, Request

from usahaku_navigator.config import Settings, get_settings
from usahaku_navigator.security import get_access_token
from usahaku_navigator.services.learning_audiobooks_service import SupabaseAudiobookStore
from usahaku_navigator.services.learning_courses_service import SupabaseCourseStore
from usahaku_navigator.services.supabase_auth_service import SupabaseAuthResolver


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared AsyncClient instance.

    Raises:
        RuntimeError: If HTTP client is not initialized.
    """
    client: httpx.AsyncClient | None = getattr(request.app.state, "http_client", None)

    if client is None:
        raise RuntimeError("HTTP client not initialized. This should never happen.")

    return client


async def get_auth_resolver(
    client: httpx.AsyncClient = Depends(get_http_client),
    access_token: str | None = Depends(get_access_token),
    settings: Settings = Depends(get_settings),
) -> SupabaseAuthResolver:
    """Build the request-scoped auth resolver for the caller's token."""
    return SupabaseAuthResolver(client, access_token, settings)


async def get_audiobook_store(
    client: httpx.AsyncClient = Depends(get_http_client),
    access_token: str | None = Depends(get_access_token),
    settings: Settings = Depends(get_settings),
) -> SupabaseAudiobookStore:
    """Build the audiobook store acting with the caller's token."""
    return SupabaseAudiobookStore(client, access_token or "", settings)


async def get_course_store(
    client: httpx.AsyncClient = Depends(get_http_client),
    access_token: str | None = Depends(get_access_token),
    settings: Settings = Depends(get_settings),
) -> SupabaseCourseStore:
    """Build the course store acting with the caller's token."""
    return SupabaseCourseStore(client, access_token or "", settings)
