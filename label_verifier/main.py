"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from label_verifier.config import get_settings
from label_verifier.routes import health, verify
from label_verifier.services.ocr_service import OCRProvider, RapidOCRProvider

__version__ = "0.1.0"

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - handles startup and shutdown."""
    logger.info("Starting %s with OCR provider %s", app.title, app.state.ocr_provider.name)
    yield
    logger.info("Shutting down %s", app.title)


def create_app(ocr_provider: OCRProvider | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The OCR provider is built once here and shared by all requests; pass one
    in to use a different backend.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Verifies declared alcohol label attributes against OCR text from the label image",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.ocr_provider = ocr_provider or RapidOCRProvider.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Register route modules.
    # Each router handles a specific concern: health checks and label verification.
    app.include_router(health.router)
    app.include_router(verify.router)

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "message": settings.app_name,
            "version": __version__,
            "docs": "/docs",
        }

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    logger.info("Backend server running at http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
