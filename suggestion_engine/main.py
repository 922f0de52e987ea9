"""
Template Suggestion Engine - FastAPI Application

Main entry point for the website builder suggestion API.
Provides endpoints for suggestions, preferences, behavior tracking and the
component template library.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from suggestion_engine.config.settings import settings
from suggestion_engine.api.middleware.behavior_capture import BehaviorCaptureMiddleware
from suggestion_engine.infrastructure.exceptions import (
    SuggestionEngineError,
    ValidationError,
    NotFoundError,
)
from suggestion_engine.infrastructure.services.behavior_tracker import BehaviorTracker

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# One tracker per process; the capture middleware schedules onto it
behavior_tracker = BehaviorTracker()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    logger.info(f"Template Suggestion Engine starting in {settings.environment} mode...")

    if settings.database_url:
        try:
            from suggestion_engine.infrastructure.db.database import init_db
            await init_db()
            logger.info("SQLModel database connection pool initialized")
        except Exception as e:
            logger.warning(f"SQLModel database initialization skipped: {e}")
    else:
        logger.warning("DATABASE_URL is not set; behavior and preferences are unavailable")

    yield

    # Shutdown
    await behavior_tracker.drain()

    if settings.database_url:
        try:
            from suggestion_engine.infrastructure.db.database import close_db
            await close_db()
            logger.info("SQLModel database connection pool closed")
        except Exception as e:
            logger.warning(f"SQLModel database shutdown error: {e}")

    logger.info("Template Suggestion Engine shutting down...")


app = FastAPI(
    title="Template Suggestion Engine",
    description="Behavior-driven template suggestions for the website builder",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)
app.state.behavior_tracker = behavior_tracker

if settings.behavior_tracking_enabled:
    app.add_middleware(
        BehaviorCaptureMiddleware,
        tracker=behavior_tracker,
        path_prefix=settings.behavior_tracking_prefix,
    )

# CORS configuration from Settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle validation errors."""
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    """Handle not found errors."""
    return JSONResponse(
        status_code=404,
        content=exc.to_dict(),
    )


@app.exception_handler(SuggestionEngineError)
async def general_error_handler(request: Request, exc: SuggestionEngineError):
    """Handle all other application errors."""
    logger.error(f"Unhandled {exc.__class__.__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=500,
        content=exc.to_dict(),
    )


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "template-suggestion-engine"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Template Suggestion Engine API",
        "version": "1.0.0",
        "docs": "/docs",
    }


# ============================================================================
# Import and register routers
# ============================================================================

from suggestion_engine.api.routes import website_builder  # noqa: E402

app.include_router(website_builder.router)
