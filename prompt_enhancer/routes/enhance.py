"""
FastAPI route for prompt enhancement.

Endpoints:
- POST /api/enhance: Expand a project request into an enhanced prompt

Endpoint flow:
- Step 1: Parse/Validate → Pydantic EnhanceRequest (body itself optional)
- Step 2: Boundary check → missing/empty prompt answers 400
- Step 3: Call service → process_user_request
- Step 4: Return response → EnhanceResponse ({"enhancedPrompt": ...})
"""

import logging
from typing import Optional

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from prompt_enhancer.schemas.enhance import EnhanceRequest, EnhanceResponse, ErrorResponse
from prompt_enhancer.services.enhance_service import (
    PROMPT_REQUIRED_MESSAGE,
    is_prompt_missing,
    process_user_request,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["enhance"])


@router.post(
    "/enhance",
    response_model=EnhanceResponse,
    status_code=status.HTTP_200_OK,
    summary="Enhance a project prompt",
    description="""
    Expands a short project request into a detailed prompt.

    The request is classified as website, backend or fullstack by keyword,
    then the response lists:
    - Recommended project setup (frontend / backend / dev environment)
    - Specific enhancements for the detected request type
    - Best practices
    - Step-by-step implementation instructions

    Returns 400 with {"error": "Prompt is required"} when the prompt is
    missing or empty.
    """,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Prompt missing or empty"},
    },
)
async def enhance_endpoint(request: Optional[EnhanceRequest] = None):
    """Enhance the submitted prompt."""
    prompt = request.prompt if request is not None else None

    if is_prompt_missing(prompt):
        logger.warning("POST /api/enhance rejected: prompt missing")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=PROMPT_REQUIRED_MESSAGE).model_dump(),
        )

    logger.info("POST /api/enhance called")
    return process_user_request(prompt)
