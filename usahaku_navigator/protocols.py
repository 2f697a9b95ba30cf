"""Protocol definitions for dependency injection.

These are the external collaborators of the learning handlers. The Supabase
services implement them in production; tests substitute in-memory fakes.
"""

from typing import Protocol

from usahaku_navigator.models.learning import AudiobookRow, AuthenticatedUser, CourseRow


class AuthResolver(Protocol):
    """Resolves the current request to an authenticated identity."""

    async def get_user(self) -> AuthenticatedUser | None:
        """Return the user for this request, or None when there is no valid session.

        Raises:
            AuthProviderException: If the provider could not be asked
        """
        ...


class PlayCountStore(Protocol):
    """Owns the audiobook play counter."""

    async def increment_play_count(self, audiobook_id: str) -> None:
        """Increment the play count of one audiobook; raises on failure."""
        ...


class CourseProgressStore(Protocol):
    """Owns course progress."""

    async def update_course_progress(self, course_id: str, progress: float) -> None:
        """Store progress (0..100) for one course; raises on failure."""
        ...


class AudiobookReader(Protocol):
    """Lists a user's audiobooks, newest first."""

    async def get_audiobooks_by_user_id(self, user_id: str) -> list[AudiobookRow]: ...


class CourseReader(Protocol):
    """Lists a user's courses, newest first."""

    async def get_courses_by_user_id(self, user_id: str) -> list[CourseRow]: ...
