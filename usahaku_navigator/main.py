"""Main FastAPI application entry point."""

import os
from pathlib import Path

from dotenv import load_dotenv

from usahaku_navigator.core.app_factory import create_app
from usahaku_navigator.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

setup_logging(os.getenv("LOG_LEVEL", "INFO"))

app = create_app()


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "UsahaKu Navigator API", "docs": "/docs"}


def run() -> None:
    """Run the API with uvicorn using configured host and port."""
    import uvicorn

    from usahaku_navigator.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "usahaku_navigator.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    run()
