"""
Server runner for the Prompt Enhancer API.

Usage:
    prompt-enhancer-server
    PORT=8080 prompt-enhancer-server
"""

import logging
import threading
import time
from typing import Optional

import uvicorn

from prompt_enhancer.config import settings
from prompt_enhancer.utils.logging import configure_logging

logger = logging.getLogger(__name__)

APP_PATH = "prompt_enhancer.main:app"
THREAD_NAME = "prompt-enhancer-server"
STARTUP_TIMEOUT_SECONDS = 5.0


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Run the API in the foreground until interrupted."""
    host = host if host is not None else settings.HOST
    port = port if port is not None else settings.PORT

    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Starting server on http://{host}:{port}")
    uvicorn.run(
        APP_PATH,
        host=host,
        port=port,
        log_level=settings.LOG_LEVEL.lower()
    )


def start_in_background(
    host: Optional[str] = None,
    port: Optional[int] = None,
    timeout: float = STARTUP_TIMEOUT_SECONDS,
) -> threading.Thread:
    """
    Run the API on a daemon thread and wait for it to come up.

    Returns once the server reports it has started, the thread has died
    (e.g. the port is already in use), or `timeout` seconds have passed.
    Callers check `thread.is_alive()` to know whether the server is serving.
    The thread dies with the process, so no shutdown handling is needed.
    """
    config = uvicorn.Config(
        APP_PATH,
        host=host if host is not None else settings.HOST,
        port=port if port is not None else settings.PORT,
        log_level="warning"
    )
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, name=THREAD_NAME, daemon=True)
    thread.start()

    deadline = time.monotonic() + timeout
    while thread.is_alive() and not server.started and time.monotonic() < deadline:
        time.sleep(0.05)

    return thread


def main() -> None:
    print("=" * 60)
    print("Starting Prompt Enhancer API")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print(f"   - Enhancer UI:   GET  {settings.BASE_URL}/")
    print(f"   - Enhance:       POST {settings.BASE_URL}/api/enhance")
    print(f"   - Health Check:  GET  {settings.BASE_URL}/health")
    print(f"   - API Docs:           {settings.BASE_URL}/docs")
    print()
    print("Test with curl:")
    print(f'   curl -X POST "{settings.BASE_URL}/api/enhance" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"prompt": "Create me a website"}\'')
    print()
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    run()


if __name__ == "__main__":
    main()
