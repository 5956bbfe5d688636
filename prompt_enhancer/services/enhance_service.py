"""
Prompt enhancement service.

Glue between the entry points (HTTP route, CLI) and the enhancer agent:
- Applies the boundary rule for missing prompts
- Classifies the request once and renders the enhanced prompt
- Maps the output into EnhanceResponse
"""

import logging
from typing import Optional

from prompt_enhancer.agents.enhancer import detect_request_type, render_enhanced_prompt
from prompt_enhancer.schemas.enhance import EnhanceResponse
from prompt_enhancer.utils.logging import preview

logger = logging.getLogger(__name__)

PROMPT_REQUIRED_MESSAGE = "Prompt is required"


def is_prompt_missing(prompt: Optional[str]) -> bool:
    """
    Check whether a prompt should be rejected as missing.

    Only None and the empty string count as missing. Whitespace-only prompts
    are passed through to the enhancer unchanged.
    """
    return prompt is None or prompt == ""


def process_user_request(prompt: str) -> EnhanceResponse:
    """
    Enhance a user prompt and wrap the result in the API response model.

    Args:
        prompt: Non-empty project request

    Returns:
        EnhanceResponse with the enhanced prompt text
    """
    request_type = detect_request_type(prompt)
    logger.info(f"Enhancing prompt='{preview(prompt)}' as request_type={request_type}")

    enhanced = render_enhanced_prompt(prompt, request_type)

    logger.info(f"Enhanced prompt generated ({len(enhanced)} chars)")
    return EnhanceResponse(enhanced_prompt=enhanced)
