"""Audiobook data access backed by the ``learning_audiobooks`` table."""

from datetime import UTC, datetime

from usahaku_navigator.logging_config import get_logger, log_with_context
from usahaku_navigator.models.learning import AudiobookRow
from usahaku_navigator.services.supabase_rest import SupabaseTable

logger = get_logger(__name__)


class SupabaseAudiobookStore(SupabaseTable):
    """Audiobook queries scoped to one user's session."""

    table = "learning_audiobooks"

    async def get_audiobooks_by_user_id(self, user_id: str) -> list[AudiobookRow]:
        """List a user's audiobooks, newest first."""
        rows = await self.request(
            "GET",
            params={"select": "*", "user_id": f"eq.{user_id}", "order": "created_at.desc"},
        )
        return [AudiobookRow.model_validate(row) for row in rows or []]

    async def increment_play_count(self, audiobook_id: str) -> None:
        """Add one play to an audiobook and stamp ``last_played_at``.

        This is a read followed by a write, not an atomic increment. An
        unknown id leaves everything untouched and is not an error.
        """
        rows = await self.request("GET", params={"select": "play_count", "id": f"eq.{audiobook_id}"})
        if not rows:
            log_with_context(
                logger,
                "info",
                "Audiobook not found, play count unchanged",
                audiobook_id=audiobook_id,
                event_type="play_count_skipped",
            )
            return

        play_count = (rows[0].get("play_count") or 0) + 1
        now = datetime.now(UTC).isoformat()
        await self.request(
            "PATCH",
            params={"id": f"eq.{audiobook_id}"},
            json={"play_count": play_count, "last_played_at": now, "updated_at": now},
            prefer="return=minimal",
        )
        log_with_context(
            logger,
            "info",
            "Play count updated",
            audiobook_id=audiobook_id,
            play_count=play_count,
            event_type="play_count_updated",
        )
