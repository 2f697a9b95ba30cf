"""Pydantic models for learning content requests, rows and responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator


def _is_bool_or_zero(v: Any) -> bool:
    # Numeric ids are coerced to strings, but 0 counts as a missing id
    return isinstance(v, bool) or (isinstance(v, int | float) and v == 0)


class AuthenticatedUser(BaseModel):
    """Identity returned by the auth provider for the current request.

    Only ``id`` is consumed; other attributes are kept for logging.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    email: str | None = None
    role: str | None = None


class PlayCountRequest(BaseModel):
    """Body of ``POST /api/learning/audiobooks/play``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    audiobook_id: str = Field(alias="audiobookId", min_length=1)

    @field_validator("audiobook_id", mode="before")
    @classmethod
    def reject_falsy_numbers(cls, v: Any) -> Any:
        if _is_bool_or_zero(v):
            raise ValueError("audiobookId is required")
        return v


class CourseProgressRequest(BaseModel):
    """Body of ``POST /api/learning/courses/progress``.

    ``progress`` is only checked for being a number here; the 0..100 range
    gets its own error message in the handler.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    course_id: str = Field(alias="courseId", min_length=1)
    progress: StrictInt | StrictFloat

    @field_validator("course_id", mode="before")
    @classmethod
    def reject_falsy_numbers(cls, v: Any) -> Any:
        if _is_bool_or_zero(v):
            raise ValueError("courseId is required")
        return v

    @field_validator("progress", mode="before")
    @classmethod
    def reject_booleans(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("progress must be a number")
        return v


class AudiobookRow(BaseModel):
    """Row of the ``learning_audiobooks`` table."""

    model_config = ConfigDict(extra="allow")

    id: str
    user_id: str
    title: str
    description: str = ""
    content: str = ""
    audio_url: str | None = None
    duration_minutes: int | float | None = None
    is_favorite: bool | None = None
    play_count: int | None = None
    last_played_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CourseRow(BaseModel):
    """Row of the ``learning_courses`` table."""

    model_config = ConfigDict(extra="allow")

    id: str
    user_id: str
    title: str
    description: str = ""
    progress_percentage: int | float | None = None
    is_completed: bool | None = None
    completion_date: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class LearningContent(BaseModel):
    """Payload of ``GET /api/learning``; absent collections are omitted."""

    audiobooks: list[AudiobookRow] | None = None
    courses: list[CourseRow] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json")
        return {key: rows for key, rows in payload.items() if rows is not None}
