"""Access token extraction and host/origin policy for UsahaKu Navigator."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from usahaku_navigator.config import Settings
from usahaku_navigator.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

# HTTP Bearer token scheme; a missing header is reported as "no session", not a 403
security = HTTPBearer(auto_error=False)

# Cookie used by browser clients that cannot set an Authorization header
ACCESS_TOKEN_COOKIE = "sb-access-token"


async def get_access_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str | None:
    """Get the caller's Supabase access token.

    The Authorization header wins over the cookie. The token is passed on
    to the auth provider untouched; it is never decoded here.

    Example:
        Authorization: Bearer <supabase-access-token>
    """
    if credentials and credentials.credentials:
        return credentials.credentials

    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if not token:
        log_with_context(
            logger,
            "debug",
            "Request carries no access token",
            event_type="auth_check",
            path=str(request.url.path),
            ip=request.client.host if request.client else "unknown",
        )
    return token or None


def get_cors_origins(settings: Settings) -> list[str]:
    """Get allowed CORS origins from settings."""
    return [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]


def get_trusted_hosts(settings: Settings) -> list[str]:
    """Get trusted host patterns from settings."""
    return [host.strip() for host in settings.trusted_hosts.split(",") if host.strip()]
