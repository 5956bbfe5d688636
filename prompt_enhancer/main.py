"""
FastAPI application entry point for the Prompt Enhancer.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from prompt_enhancer.config import settings
from prompt_enhancer.routes.enhance import router as enhance_router
from prompt_enhancer.routes.health import router as health_router
from prompt_enhancer.routes.pages import router as pages_router
from prompt_enhancer.utils.logging import configure_logging

# Configure logging (no-op when an entry point already did)
configure_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (empty means none)
    - Anything else: Allows all origins for local dev

    The bundled page at "/" is same-origin, so CORS only matters for
    external web clients.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No cross-origin web clients allowed."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="Prompt Enhancer API",
    description="Expands short project requests into detailed prompts with modern stack recommendations",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Strip non-serializable context (e.g. exception objects) from errors."""
    return [
        {key: value for key, value in error.items() if key in ("type", "loc", "msg")}
        for error in exc.errors()
    ]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log detailed validation errors for debugging.

    Covers malformed bodies (non-JSON, non-string prompt). A missing prompt is
    not a validation error; the route answers it with 400.
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": jsonable_errors(exc),
        }
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(pages_router)
app.include_router(enhance_router)
app.include_router(health_router)

logger.info("FastAPI app initialized successfully")
