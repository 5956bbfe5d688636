"""
Logging helpers shared by the API, the server runner and the CLI.

Prompts are user text: log a short preview (see `preview`) and the detected
request type, never the full prompt or the full enhanced output.
"""

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Union[str, int]) -> None:
    """
    Configure the root logger once per process.

    The first entry point to call this wins; later calls (including the one
    made when prompt_enhancer.main is imported) leave the existing setup alone.
    This lets the CLI keep the app quiet while it owns the terminal.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with its own stream handler, for modules that log before
    (or without) configure_logging being called.

    Usage:
        >>> from prompt_enhancer.utils.logging import get_logger
        >>> logger = get_logger(__name__)
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)

    return logger


def preview(text: str, limit: int = 50) -> str:
    """Shorten user text for log lines."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
