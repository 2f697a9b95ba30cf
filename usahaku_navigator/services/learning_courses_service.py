"""Course data access backed by the ``learning_courses`` table."""

from datetime import UTC, datetime
from typing import Any

from usahaku_navigator.models.learning import CourseRow
from usahaku_navigator.services.supabase_rest import SupabaseTable


class SupabaseCourseStore(SupabaseTable):
    """Course queries scoped to one user's session."""

    table = "learning_courses"

    async def get_courses_by_user_id(self, user_id: str) -> list[CourseRow]:
        """List a user's courses, newest first."""
        rows = await self.request(
            "GET",
            params={"select": "*", "user_id": f"eq.{user_id}", "order": "created_at.desc"},
        )
        return [CourseRow.model_validate(row) for row in rows or []]

    async def update_course_progress(self, course_id: str, progress: float) -> None:
        """Store course progress, clamped to 0..100; 100 marks the course completed."""
        now = datetime.now(UTC).isoformat()
        updates: dict[str, Any] = {
            "progress_percentage": min(max(progress, 0), 100),
            "updated_at": now,
        }
        if progress >= 100:
            updates["is_completed"] = True
            updates["completion_date"] = now

        await self.request("PATCH", params={"id": f"eq.{course_id}"}, json=updates, prefer="return=minimal")
