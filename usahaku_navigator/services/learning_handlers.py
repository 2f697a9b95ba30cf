"""Learning content request handlers.

Each handler takes its collaborators explicitly, runs the request in a single
pass and returns a ``Result``. Nothing here knows about HTTP; the router maps
results to responses. No handler retries or caches anything.
"""

import json
from typing import Any

from pydantic import ValidationError

from usahaku_navigator.logging_config import get_logger, log_with_context
from usahaku_navigator.models.learning import CourseProgressRequest, LearningContent, PlayCountRequest
from usahaku_navigator.protocols import (
    AudiobookReader,
    AuthResolver,
    CourseProgressStore,
    CourseReader,
    PlayCountStore,
)
from usahaku_navigator.results import InternalError, InvalidInput, Ok, Result, Unauthorized

logger = get_logger(__name__)

AUDIOBOOK_ID_REQUIRED = "Audiobook ID is required"
PLAY_COUNT_FAILED = "Failed to update play count"

COURSE_PROGRESS_REQUIRED = "Course ID and progress percentage are required"
COURSE_PROGRESS_RANGE = "Progress must be between 0 and 100"
COURSE_PROGRESS_FAILED = "Failed to update course progress"

CONTENT_TYPES = ("audiobook", "course")
CONTENT_TYPE_INVALID = 'Invalid content type. Must be "audiobook" or "course"'
CONTENT_FETCH_FAILED = "Failed to fetch learning content"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON value: {name}")


def _parse_body(body: bytes) -> Any:
    """Decode a strict JSON body; NaN and Infinity are not JSON."""
    return json.loads(body, parse_constant=_reject_constant)


def _internal_error(message: str, exc: Exception) -> InternalError:
    log_with_context(
        logger,
        "error",
        message,
        error=str(exc),
        error_type=type(exc).__name__,
        event_type="learning_handler_error",
    )
    return InternalError.from_exception(message, exc)


async def record_audiobook_play(auth: AuthResolver, store: PlayCountStore, body: bytes) -> Result:
    """Count one play of an audiobook for an authenticated caller.

    Args:
        auth: Resolves the caller's session
        store: Owns the play counter
        body: Raw JSON request body, expected to be ``{"audiobookId": "..."}``

    Returns:
        ``Unauthorized`` without a session, ``InvalidInput`` without an
        audiobook id, ``Ok`` once the store has counted the play, and
        ``InternalError`` if anything raised along the way.
    """
    try:
        user = await auth.get_user()
        if user is None:
            return Unauthorized()

        payload = _parse_body(body)
        try:
            play = PlayCountRequest.model_validate(payload)
        except ValidationError:
            return InvalidInput(AUDIOBOOK_ID_REQUIRED)

        await store.increment_play_count(play.audiobook_id)
        return Ok()
    except Exception as e:
        return _internal_error(PLAY_COUNT_FAILED, e)


async def record_course_progress(auth: AuthResolver, store: CourseProgressStore, body: bytes) -> Result:
    """Store progress for a course; body is ``{"courseId": "...", "progress": 0..100}``."""
    try:
        user = await auth.get_user()
        if user is None:
            return Unauthorized()

        payload = _parse_body(body)
        try:
            update = CourseProgressRequest.model_validate(payload)
        except ValidationError:
            return InvalidInput(COURSE_PROGRESS_REQUIRED)

        if not 0 <= update.progress <= 100:
            return InvalidInput(COURSE_PROGRESS_RANGE)

        await store.update_course_progress(update.course_id, update.progress)
        return Ok()
    except Exception as e:
        return _internal_error(COURSE_PROGRESS_FAILED, e)


async def list_learning_content(
    auth: AuthResolver,
    audiobooks: AudiobookReader,
    courses: CourseReader,
    content_type: str | None = None,
) -> Result:
    """List the caller's audiobooks and/or courses.

    A collection that fails to load is logged and returned empty, so one
    broken table does not hide the other.
    """
    try:
        user = await auth.get_user()
        if user is None:
            return Unauthorized()

        if content_type and content_type not in CONTENT_TYPES:
            return InvalidInput(CONTENT_TYPE_INVALID)

        content = LearningContent()

        if not content_type or content_type == "audiobook":
            try:
                content.audiobooks = await audiobooks.get_audiobooks_by_user_id(user.id)
            except Exception as e:
                log_with_context(
                    logger,
                    "error",
                    "Error fetching audiobooks",
                    error=str(e),
                    user_id=user.id,
                    event_type="learning_fetch_error",
                )
                content.audiobooks = []

        if not content_type or content_type == "course":
            try:
                content.courses = await courses.get_courses_by_user_id(user.id)
            except Exception as e:
                log_with_context(
                    logger,
                    "error",
                    "Error fetching courses",
                    error=str(e),
                    user_id=user.id,
                    event_type="learning_fetch_error",
                )
                content.courses = []

        return Ok({"data": content.to_payload()})
    except Exception as e:
        return _internal_error(CONTENT_FETCH_FAILED, e)
