"""UsahaKu Navigator models"""

from usahaku_navigator.models.base_models import DetailedHealthResponse, HealthResponse
from usahaku_navigator.models.learning import (
    AudiobookRow,
    AuthenticatedUser,
    CourseProgressRequest,
    CourseRow,
    LearningContent,
    PlayCountRequest,
)

__all__ = [
    "DetailedHealthResponse",
    "HealthResponse",
    "AudiobookRow",
    "AuthenticatedUser",
    "CourseProgressRequest",
    "CourseRow",
    "LearningContent",
    "PlayCountRequest",
]
