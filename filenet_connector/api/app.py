"""
FastAPI application for the FileNet connector.

Exposes the document operations over HTTP for hosts that do not run a
Temporal worker:

- Document operations under /documents
- Health check at /health
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI

from filenet_connector import __version__
from filenet_connector.api.errors import add_exception_handlers
from filenet_connector.api.responses import HealthCheckResponse
from filenet_connector.api.routers import documents

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
        ],
    )

    logging.getLogger("fastapi").setLevel(logging.INFO)
    logging.getLogger("uvicorn").setLevel(logging.INFO)


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="FileNet Connector API",
        description="Document operations against the FileNet ECM",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    add_exception_handlers(app)
    app.include_router(documents.router, prefix="/documents")

    @app.get("/health", response_model=HealthCheckResponse)
    async def health_check() -> HealthCheckResponse:
        """Health check endpoint."""
        return HealthCheckResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now(timezone.utc),
        )

    return app


setup_logging()

app = create_app()
