"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from usahaku_navigator import __version__
from usahaku_navigator.config import get_settings
from usahaku_navigator.core.lifespan import lifespan
from usahaku_navigator.core.middleware import setup_middleware
from usahaku_navigator.middleware.error_handlers import register_error_handlers
from usahaku_navigator.routers import health_router, learning_router


def custom_openapi(app: FastAPI):
    """Generate custom OpenAPI schema with the Supabase bearer scheme."""
    if app.openapi_schema:
        return app.openapi_schema

    from fastapi.openapi.utils import get_openapi

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "BearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": "Supabase access token of the signed-in user",
        }
    }

    for path, path_item in openapi_schema.get("paths", {}).items():
        if not path.startswith("/api/"):
            continue
        for method, operation in path_item.items():
            if method in ["get", "post", "put", "delete", "patch"]:
                operation["security"] = [{"BearerAuth": []}]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="UsahaKu Navigator API",
        description="""
        **UsahaKu Navigator** - learning content API for small-business owners

        ## Authentication
        Every `/api/` endpoint expects the Supabase access token of the signed-in
        user, either as `Authorization: Bearer <token>` or in the `sb-access-token` cookie.

        ## Health
        - `/health` - Basic health check
        - `/health/live` - Liveness probe
        - `/health/ready` - Readiness probe (checks Supabase)
        """,
        version=__version__,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])
    app.include_router(learning_router.router, prefix="/api/learning", tags=["learning"])

    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]

    return app
