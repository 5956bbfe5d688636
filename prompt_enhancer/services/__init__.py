"""
Service layer for the Prompt Enhancer.

Services act as the glue between entry points (HTTP routes, CLI) and the
enhancer agent.
"""

from .enhance_service import (
    PROMPT_REQUIRED_MESSAGE,
    is_prompt_missing,
    process_user_request,
)

__all__ = [
    "PROMPT_REQUIRED_MESSAGE",
    "is_prompt_missing",
    "process_user_request",
]
