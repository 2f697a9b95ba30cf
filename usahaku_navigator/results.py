"""Handler outcomes and their single mapping to HTTP responses.

Learning handlers never raise to the transport layer. They return one of
``Ok``, ``Unauthorized``, ``InvalidInput`` or ``InternalError`` and the
router turns it into a ``JSONResponse`` with ``to_response``.
"""

from dataclasses import dataclass, field
from typing import Any

from fastapi.responses import JSONResponse

UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class Ok:
    """Request completed; ``data`` is merged into ``{"success": true}``."""

    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Unauthorized:
    """No authenticated session could be resolved."""

    message: str = "Unauthorized"


@dataclass(frozen=True)
class InvalidInput:
    """The request body or query failed validation."""

    message: str


@dataclass(frozen=True)
class InternalError:
    """Resolving the session or delegating to the store failed."""

    message: str
    details: str = UNKNOWN_ERROR

    @classmethod
    def from_exception(cls, message: str, exc: BaseException) -> "InternalError":
        """Build an error result, using the exception text as ``details`` when it has any."""
        text = getattr(exc, "message", None) or str(exc)
        return cls(message=message, details=text or UNKNOWN_ERROR)


Result = Ok | Unauthorized | InvalidInput | InternalError


def to_response(result: Result) -> JSONResponse:
    """Map a handler result to its JSON response."""
    if isinstance(result, Ok):
        return JSONResponse(status_code=200, content={"success": True, **result.data})
    if isinstance(result, Unauthorized):
        return JSONResponse(status_code=401, content={"error": result.message})
    if isinstance(result, InvalidInput):
        return JSONResponse(status_code=400, content={"error": result.message})
    if isinstance(result, InternalError):
        return JSONResponse(status_code=500, content={"error": result.message, "details": result.details})
    raise TypeError(f"Unsupported result type: {type(result).__name__}")
