from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from usahaku_navigator.exceptions import ConfigurationException, ErrorCode
from usahaku_navigator.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent  # usahaku-navigator/


class Settings(BaseSettings):
    """Application settings with validation.

    Supabase fields are required and will raise validation errors if missing.
    Secrets must be provided via environment variables or .env file.
    """

    # API server settings
    api_host: str = Field(min_length=1, default="127.0.0.1", description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # Supabase - required for auth and learning content
    supabase_url: str = Field(pattern=r"^https?://", description="Supabase project URL")
    supabase_anon_key: str = Field(min_length=1, description="Supabase anon (public) API key")
    supabase_timeout: float = Field(gt=0, default=10.0, description="Timeout in seconds for Supabase calls")

    # Security
    cors_origins: str = Field(default="http://localhost:3000", description="Comma-separated allowed CORS origins")
    trusted_hosts: str = Field(
        default="localhost,127.0.0.1,testserver",
        description="Comma-separated trusted Host header values",
    )

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("supabase_url", mode="after")
    @classmethod
    def validate_supabase_url(cls, v: str) -> str:
        """Strip trailing slashes so endpoint paths can be appended directly."""
        return v.strip().rstrip("/")

    @field_validator("supabase_anon_key", mode="after")
    @classmethod
    def validate_supabase_anon_key(cls, v: str) -> str:
        """Ensure supabase_anon_key is not whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("supabase_anon_key must not be empty")
        return v

    @property
    def supabase_auth_url(self) -> str:
        return f"{self.supabase_url}/auth/v1"

    @property
    def supabase_rest_url(self) -> str:
        return f"{self.supabase_url}/rest/v1"


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request. Use this with FastAPI's Depends() for
    dependency injection.

    Returns:
        Cached Settings instance

    Raises:
        ConfigurationException: If required settings are missing or invalid

    Example:
        @router.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"supabase": settings.supabase_url}
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            _settings_instance = Settings()  # type: ignore[call-arg]
        except ValidationError as e:
            fields = [".".join(str(loc) for loc in err["loc"]) for err in e.errors()]
            log_with_context(
                logger,
                "error",
                "Invalid or missing configuration",
                fields=fields,
                event_type="config_invalid",
            )
            raise ConfigurationException(
                "Invalid or missing configuration",
                code=ErrorCode.CONFIG_MISSING,
                details={"fields": fields},
            ) from e
    return _settings_instance
