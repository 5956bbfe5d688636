"""
Enhancer Type Definitions

Request categories and the keyword sets used to detect them.
"""

from typing import Literal, Tuple, get_args

# Closed set of request categories. Defaults to "website" when unclear.
RequestType = Literal["website", "backend", "fullstack"]

REQUEST_TYPES: Tuple[str, ...] = get_args(RequestType)

DEFAULT_REQUEST_TYPE: RequestType = "website"

# Keyword sets, checked in this order (first match wins)
WEBSITE_KEYWORDS: Tuple[str, ...] = ("website", "web app", "landing page", "frontend")
BACKEND_KEYWORDS: Tuple[str, ...] = ("api", "backend", "server")
FULLSTACK_KEYWORDS: Tuple[str, ...] = ("full stack", "fullstack")

# "website" combined with one of these also means fullstack (shadowed by WEBSITE_KEYWORDS)
FULLSTACK_COMPANION_KEYWORDS: Tuple[str, ...] = ("database", "backend")
