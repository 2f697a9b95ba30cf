"""Learning content API routes (audiobook plays, course progress, listing)."""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from usahaku_navigator.dependencies import (
    get_audiobook_store,
    get_auth_resolver,
    get_course_store,
)
from usahaku_navigator.protocols import (
    AudiobookReader,
    AuthResolver,
    CourseProgressStore,
    CourseReader,
    PlayCountStore,
)
from usahaku_navigator.results import to_response
from usahaku_navigator.services import learning_handlers

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

UNAUTHORIZED_RESPONSE = {
    "description": "No authenticated session",
    "content": {"application/json": {"example": {"error": "Unauthorized"}}},
}


@router.post(
    "/audiobooks/play",
    summary="Record an audiobook play",
    description="""
    Increments the play count of an audiobook and stamps its last-played time.

    **🔒 Authentication Required:** Supabase access token of the signed-in user.

    Not idempotent: every successful call counts another play.
    """,
    responses={
        200: {
            "description": "Play recorded",
            "content": {"application/json": {"example": {"success": True}}},
        },
        400: {
            "description": "Missing audiobook id",
            "content": {"application/json": {"example": {"error": "Audiobook ID is required"}}},
        },
        401: UNAUTHORIZED_RESPONSE,
        500: {
            "description": "Play count update failed",
            "content": {
                "application/json": {"example": {"error": "Failed to update play count", "details": "db down"}}
            },
        },
    },
)
@limiter.limit("120/minute")
async def play_audiobook(
    request: Request,
    auth: AuthResolver = Depends(get_auth_resolver),
    store: PlayCountStore = Depends(get_audiobook_store),
) -> JSONResponse:
    """Record one play of the audiobook named by ``audiobookId`` in the JSON body."""
    body = await request.body()
    result = await learning_handlers.record_audiobook_play(auth, store, body)
    return to_response(result)


@router.post(
    "/courses/progress",
    summary="Update course progress",
    description="""
    Stores the caller's progress (0-100) for a course; 100 marks it completed.

    **🔒 Authentication Required:** Supabase access token of the signed-in user.
    """,
    responses={
        200: {"description": "Progress stored", "content": {"application/json": {"example": {"success": True}}}},
        400: {"description": "Missing course id or progress out of range"},
        401: UNAUTHORIZED_RESPONSE,
        500: {"description": "Course progress update failed"},
    },
)
@limiter.limit("120/minute")
async def update_course_progress(
    request: Request,
    auth: AuthResolver = Depends(get_auth_resolver),
    store: CourseProgressStore = Depends(get_course_store),
) -> JSONResponse:
    body = await request.body()
    result = await learning_handlers.record_course_progress(auth, store, body)
    return to_response(result)


@router.get(
    "",
    summary="List learning content",
    description="""
    Lists the caller's audiobooks and courses, newest first.

    **🔒 Authentication Required:** Supabase access token of the signed-in user.
    """,
    responses={
        200: {
            "description": "Learning content",
            "content": {
                "application/json": {"example": {"success": True, "data": {"audiobooks": [], "courses": []}}}
            },
        },
        400: {"description": "Unknown content type"},
        401: UNAUTHORIZED_RESPONSE,
        500: {"description": "Failed to fetch learning content"},
    },
)
@limiter.limit("60/minute")
async def get_learning_content(
    request: Request,
    auth: AuthResolver = Depends(get_auth_resolver),
    audiobooks: AudiobookReader = Depends(get_audiobook_store),
    courses: CourseReader = Depends(get_course_store),
    content_type: str | None = Query(default=None, alias="type", description="audiobook or course"),
) -> JSONResponse:
    result = await learning_handlers.list_learning_content(auth, audiobooks, courses, content_type)
    return to_response(result)
