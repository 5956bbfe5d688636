"""
Liveness route for the Prompt Enhancer.

The enhancer holds no connections or state, so answering at all means the
service is healthy.
"""

from fastapi import APIRouter

from prompt_enhancer.schemas.health import HealthResponse
from prompt_enhancer.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health_check() -> HealthResponse:
    logger.debug("Health check endpoint called")
    return HealthResponse()
