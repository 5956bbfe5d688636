"""
Prompt Enhancer Package

Turns a short project request ("create me a website") into an expanded prompt
recommending a modern stack, best practices and setup steps.

Main Components:
- types: RequestType literal and the keyword sets used for detection
- content: Static, read-only recommendation tables
- agent: Classification and section builders

Usage:
    from prompt_enhancer.agents.enhancer import enhance_prompt

    text = enhance_prompt("Create me a website")
"""

from prompt_enhancer.agents.enhancer.agent import (
    build_best_practices,
    build_implementation_steps,
    build_project_setup,
    build_specific_enhancements,
    detect_request_type,
    enhance_prompt,
    render_enhanced_prompt,
    select_best_practices,
)
from prompt_enhancer.agents.enhancer.content import (
    BEST_PRACTICES,
    TECH_UPGRADES,
)
from prompt_enhancer.agents.enhancer.types import (
    DEFAULT_REQUEST_TYPE,
    REQUEST_TYPES,
    RequestType,
)

__all__ = [
    # Main runner
    "enhance_prompt",
    "detect_request_type",
    "render_enhanced_prompt",
    # Section builders
    "build_project_setup",
    "build_specific_enhancements",
    "build_best_practices",
    "build_implementation_steps",
    "select_best_practices",
    # Types
    "RequestType",
    "REQUEST_TYPES",
    "DEFAULT_REQUEST_TYPE",
    # Tables
    "BEST_PRACTICES",
    "TECH_UPGRADES",
]
