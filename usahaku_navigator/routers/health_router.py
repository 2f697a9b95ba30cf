"""Health endpoints."""

from datetime import UTC, datetime

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from usahaku_navigator import __version__
from usahaku_navigator.cache import get_cache
from usahaku_navigator.config import Settings, get_settings
from usahaku_navigator.dependencies import get_http_client
from usahaku_navigator.models import DetailedHealthResponse, HealthResponse
from usahaku_navigator.services import supabase_auth_service

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

SUPABASE_CHECK_CACHE_KEY = "health:supabase_check"
SUPABASE_CHECK_TTL_SECONDS = 60


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for container healthchecks and basic monitoring.
    For dependency status, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/live")
async def liveness_check():
    """Liveness probe - is the process serving requests at all?"""
    return {"status": "alive"}


@router.get("/health/ready", response_model=DetailedHealthResponse)
@limiter.limit("30/minute")
async def readiness_check(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Readiness probe - can the application serve traffic?

    Checks:
    - HTTP client initialization
    - Supabase auth reachability (cached 60s)

    **Returns:**
    - 200: Application is ready to serve requests
    - 503: Application is not ready (dependency failure)
    """
    checks = {}
    all_healthy = True

    checks["http_client"] = "ok" if client else "failed"
    if not client:
        all_healthy = False

    cache = get_cache()
    cached_result = await cache.get(SUPABASE_CHECK_CACHE_KEY)

    if cached_result is not None:
        checks["supabase"] = cached_result
    else:
        try:
            await supabase_auth_service.check_health(client, settings)
            checks["supabase"] = "ok"
        except Exception as e:
            checks["supabase"] = f"failed: {str(e)[:50]}"
        await cache.set(SUPABASE_CHECK_CACHE_KEY, checks["supabase"], SUPABASE_CHECK_TTL_SECONDS)

    if checks["supabase"] != "ok":
        all_healthy = False

    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content=DetailedHealthResponse(
            status="healthy" if all_healthy else "unhealthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
        ).model_dump(mode="json"),
    )
