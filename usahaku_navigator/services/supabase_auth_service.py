"""Supabase auth service for resolving the current user."""

import httpx

from usahaku_navigator.config import Settings, get_settings
from usahaku_navigator.exceptions import AuthProviderException
from usahaku_navigator.logging_config import get_logger, log_with_context
from usahaku_navigator.models.learning import AuthenticatedUser

logger = get_logger(__name__)


class SupabaseAuthResolver:
    """Resolve a request's access token to a Supabase user.

    The provider is asked fresh on every call; nothing is cached and the
    token is never decoded locally.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        access_token: str | None,
        settings: Settings | None = None,
    ):
        self.client = client
        self.access_token = access_token
        self.settings = settings or get_settings()

    async def get_user(self) -> AuthenticatedUser | None:
        """Get the user behind the access token.

        Returns:
            The authenticated user, or None if there is no token or the
            provider rejects it.

        Raises:
            AuthProviderException: If the provider is unreachable or answers with a 5xx.
        """
        if not self.access_token:
            log_with_context(logger, "debug", "No access token on request", event_type="auth_missing_token")
            return None

        url = f"{self.settings.supabase_auth_url}/user"
        try:
            response = await self.client.get(
                url,
                headers={
                    "apikey": self.settings.supabase_anon_key,
                    "Authorization": f"Bearer {self.access_token}",
                },
                timeout=self.settings.supabase_timeout,
            )
        except httpx.HTTPError as e:
            raise AuthProviderException(
                f"Auth provider request failed: {str(e)}",
                details={"error_type": "network_error"},
            ) from e

        if response.status_code >= 500:
            raise AuthProviderException(
                f"Auth provider returned HTTP {response.status_code}",
                details={"status_code": response.status_code},
            )

        if response.status_code >= 400:
            log_with_context(
                logger,
                "warning",
                "Auth provider rejected access token",
                status_code=response.status_code,
                event_type="auth_failure",
            )
            return None

        try:
            user = AuthenticatedUser.model_validate(response.json())
        except ValueError as e:
            log_with_context(
                logger,
                "warning",
                "Auth provider returned no usable user",
                error=str(e),
                event_type="auth_failure",
            )
            return None

        log_with_context(logger, "debug", "User resolved", user_id=user.id, event_type="auth_success")
        return user


async def check_health(client: httpx.AsyncClient, settings: Settings | None = None) -> None:
    """Ping the Supabase auth health endpoint.

    Raises:
        httpx.HTTPError: If the endpoint is unreachable or unhealthy
    """
    if settings is None:
        settings = get_settings()
    response = await client.get(
        f"{settings.supabase_auth_url}/health",
        headers={"apikey": settings.supabase_anon_key},
        timeout=2.0,
    )
    response.raise_for_status()
