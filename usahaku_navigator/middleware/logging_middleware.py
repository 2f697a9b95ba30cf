"""Logging helpers with sensitive data redaction."""

import re

# Sensitive parameters to redact from URLs
SENSITIVE_PARAMS = [
    "apikey",
    "api_key",
    "token",
    "password",
    "secret",
    "refresh_token",
    "access_token",
    "client_secret",
    "authorization",
    "bearer",
]

_SENSITIVE_PATTERN = re.compile(
    rf"(?P<name>\b(?:{'|'.join(re.escape(p) for p in SENSITIVE_PARAMS)}))=(?P<value>[^&\s\"]+)",
    re.IGNORECASE,
)


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    return _SENSITIVE_PATTERN.sub(r"\g<name>=***REDACTED***", url)
