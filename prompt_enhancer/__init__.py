"""
Prompt Enhancer.

Expands short project requests into detailed prompts with modern stack
recommendations. Exposed over HTTP (prompt_enhancer.main) and as an
interactive CLI (prompt_enhancer.cli).
"""

__version__ = "0.1.0"
