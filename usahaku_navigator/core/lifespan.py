"""Application lifespan management."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from usahaku_navigator import __version__
from usahaku_navigator.config import Settings, get_settings
from usahaku_navigator.logging_config import get_logger, log_with_context
from usahaku_navigator.middleware.logging_middleware import redact_sensitive_data

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log outgoing requests with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log responses with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared HTTP client with pooling, timeouts and logging hooks."""
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=5.0,
            read=settings.supabase_timeout,
            write=5.0,
            pool=5.0,
        ),
        limits=httpx.Limits(
            max_keepalive_connections=10,
            max_connections=50,
            keepalive_expiry=30.0,
        ),
        follow_redirects=True,
        event_hooks=event_hooks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions raised while the app is running are logged and re-raised so
    the client is still closed.
    """
    log_with_context(
        logger,
        "info",
        "Starting UsahaKu Navigator application",
        version=__version__,
        event_type="app_startup",
    )

    client = create_http_client(get_settings())
    app.state.http_client = client
    log_with_context(
        logger,
        "info",
        "HTTP client initialized successfully",
        event_type="http_client_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down UsahaKu Navigator application",
            event_type="app_shutdown",
        )
        await client.aclose()
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )
