"""Thin client for the Supabase data API (PostgREST)."""

from typing import Any

import httpx

from usahaku_navigator.config import Settings, get_settings
from usahaku_navigator.exceptions import LearningStoreAPIException, LearningStoreException


class SupabaseTable:
    """Request helper bound to one table and one user's access token.

    The user's token is forwarded so row-level security applies to every
    query; the anon key is sent as ``apikey``.
    """

    table: str = ""

    def __init__(
        self,
        client: httpx.AsyncClient,
        access_token: str,
        settings: Settings | None = None,
    ):
        self.client = client
        self.access_token = access_token
        self.settings = settings or get_settings()

    @property
    def url(self) -> str:
        return f"{self.settings.supabase_rest_url}/{self.table}"

    def _headers(self, prefer: str | None = None) -> dict[str, str]:
        headers = {
            "apikey": self.settings.supabase_anon_key,
            "Authorization": f"Bearer {self.access_token}",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    async def request(
        self,
        method: str,
        params: dict[str, str],
        json: dict[str, Any] | None = None,
        prefer: str | None = None,
    ) -> Any:
        """Send one PostgREST request and return the decoded body (None if empty).

        Raises:
            LearningStoreAPIException: If Supabase answers with an error status
            LearningStoreException: If the request could not be sent
        """
        try:
            response = await self.client.request(
                method,
                self.url,
                params=params,
                json=json,
                headers=self._headers(prefer),
                timeout=self.settings.supabase_timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LearningStoreAPIException(
                f"Supabase request failed (HTTP {e.response.status_code}): {e.response.text}",
                details={"table": self.table, "method": method, "status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise LearningStoreException(
                f"Failed to reach Supabase: {str(e)}",
                details={"table": self.table, "method": method, "error_type": "network_error"},
            ) from e

        if not response.content:
            return None
        return response.json()
