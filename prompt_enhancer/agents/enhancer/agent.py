"""
Prompt Enhancer Runner

Deterministic keyword-table workflow. Classifies a free-text project request
into a request type and assembles a Markdown-style enhanced prompt from the
static tables in content.py.

No LLM call, no I/O, no state: the same request always yields the same text.
"""

import logging
from typing import Iterable, List

from prompt_enhancer.agents.enhancer.content import (
    BACKEND_SETUP,
    BACKEND_STEPS,
    BEST_PRACTICES,
    DEV_ENVIRONMENT_SETUP,
    FRONTEND_SETUP,
    FRONTEND_STEPS,
    INTEGRATION_STEPS,
    PRACTICE_EXCLUSIONS,
    SPECIFIC_ENHANCEMENTS,
    Step,
)
from prompt_enhancer.agents.enhancer.types import (
    BACKEND_KEYWORDS,
    DEFAULT_REQUEST_TYPE,
    FULLSTACK_COMPANION_KEYWORDS,
    FULLSTACK_KEYWORDS,
    WEBSITE_KEYWORDS,
    RequestType,
)

logger = logging.getLogger(__name__)


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def detect_request_type(user_prompt: str) -> RequestType:
    """
    Classify a request by case-insensitive keyword search.

    Rules are checked in order and the first match wins:
    1. website / web app / landing page / frontend -> "website"
    2. api / backend / server -> "backend"
    3. full stack / fullstack, or "website" with database/backend -> "fullstack"
    4. anything else -> "website"

    The "website" clause of rule 3 can never fire because rule 1 catches
    "website" first. It is kept so the table reads the same as the rules.
    """
    prompt = user_prompt.lower()

    if _contains_any(prompt, WEBSITE_KEYWORDS):
        return "website"
    if _contains_any(prompt, BACKEND_KEYWORDS):
        return "backend"
    if _contains_any(prompt, FULLSTACK_KEYWORDS) or (
        "website" in prompt and _contains_any(prompt, FULLSTACK_COMPANION_KEYWORDS)
    ):
        return "fullstack"
    return DEFAULT_REQUEST_TYPE


def _bullets(items: Iterable[str]) -> str:
    return "".join(f"- {item}\n" for item in items)


def _block(title: str, items: Iterable[str]) -> str:
    return f"### {title}\n{_bullets(items)}\n"


def _numbered_steps(title: str, steps: Iterable[Step]) -> str:
    lines: List[str] = [f"### {title}\n"]
    for number, (description, commands) in enumerate(steps, start=1):
        lines.append(f"{number}. {description}\n")
        if commands:
            lines.append("   ```bash\n")
            lines.extend(f"   {command}\n" for command in commands)
            lines.append("   ```\n")
    lines.append("\n")
    return "".join(lines)


def _has_frontend(request_type: RequestType) -> bool:
    return request_type in ("website", "fullstack")


def _has_backend(request_type: RequestType) -> bool:
    return request_type in ("backend", "fullstack")


def build_project_setup(request_type: RequestType) -> str:
    """Render the '## Enhanced Project Setup' section."""
    setup = "## Enhanced Project Setup\n\n"

    if _has_frontend(request_type):
        setup += _block("Frontend", FRONTEND_SETUP)

    if _has_backend(request_type):
        setup += _block("Backend", BACKEND_SETUP)

    if request_type == "fullstack":
        setup += _block("Development Environment", DEV_ENVIRONMENT_SETUP)

    return setup


def build_specific_enhancements(request_type: RequestType) -> str:
    """Render the '## Specific Enhancements' section."""
    return (
        "## Specific Enhancements\n\n"
        + _bullets(SPECIFIC_ENHANCEMENTS[request_type])
        + "\n"
    )


def select_best_practices(request_type: RequestType) -> List[str]:
    """
    Filter BEST_PRACTICES for a request type, keeping the original order.

    website drops practices mentioning "database", backend drops practices
    mentioning "theme", fullstack keeps everything.
    """
    excluded = PRACTICE_EXCLUSIONS.get(request_type)
    if excluded is None:
        return list(BEST_PRACTICES)
    return [practice for practice in BEST_PRACTICES if excluded not in practice.lower()]


def build_best_practices(request_type: RequestType) -> str:
    """Render the '## Best Practices' section."""
    return "## Best Practices\n\n" + _bullets(select_best_practices(request_type)) + "\n"


def build_implementation_steps(request_type: RequestType) -> str:
    """Render the '## Implementation Steps' section."""
    steps = "## Implementation Steps\n\n"

    if _has_frontend(request_type):
        steps += _numbered_steps("Frontend Setup", FRONTEND_STEPS)

    if _has_backend(request_type):
        steps += _numbered_steps("Backend Setup", BACKEND_STEPS)

    if request_type == "fullstack":
        steps += _numbered_steps("Integration Steps", INTEGRATION_STEPS)

    return steps


def render_enhanced_prompt(user_prompt: str, request_type: RequestType) -> str:
    """Assemble the enhanced prompt for an already classified request."""
    return (
        f'Enhanced version of request: "{user_prompt}"\n\n'
        + build_project_setup(request_type)
        + build_specific_enhancements(request_type)
        + build_best_practices(request_type)
        + build_implementation_steps(request_type)
    )


def enhance_prompt(user_prompt: str) -> str:
    """
    Expand a free-text project request into an enhanced prompt.

    Args:
        user_prompt: The raw request, e.g. "Create me a website". Echoed
                     back verbatim on the first line.

    Returns:
        Plain text made of the echoed request followed by four sections:
        Enhanced Project Setup, Specific Enhancements, Best Practices and
        Implementation Steps.

    Notes:
        - Never raises for any string; callers reject empty prompts themselves
        - Pure: identical input gives byte-identical output
    """
    request_type = detect_request_type(user_prompt)
    logger.debug(f"Detected request_type={request_type}")

    return render_enhanced_prompt(user_prompt, request_type)
