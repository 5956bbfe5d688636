"""
Enhancement components for the Prompt Enhancer service.

1. Prompt Enhancer (Keyword-Table Workflow)
   - Classifies the request as website, backend or fullstack
   - Assembles the enhanced prompt from static recommendation tables
   - NOT an LLM agent: fully deterministic, no external calls
"""

from prompt_enhancer.agents.enhancer import (
    RequestType,
    detect_request_type,
    enhance_prompt,
)

__all__ = [
    "enhance_prompt",
    "detect_request_type",
    "RequestType",
]
