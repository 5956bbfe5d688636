#!/usr/bin/env python3
"""
Interactive command line interface for the Prompt Enhancer.

Reads one prompt per line, prints the enhanced prompt, and repeats until the
user types "exit" (any case).

Usage:
    prompt-enhancer
    prompt-enhancer --serve            # also serve the HTTP API
    python -m prompt_enhancer.cli --serve --port 8080
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from prompt_enhancer.agents.enhancer import enhance_prompt
from prompt_enhancer.config import settings
from prompt_enhancer.server import start_in_background
from prompt_enhancer.utils.logging import configure_logging

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
INPUT_PROMPT = "\nEnter your prompt: "
GOODBYE_MESSAGE = "Goodbye!"
BANNER_RULE = "================================="
BACKGROUND_LOG_LEVEL = "WARNING"


def prompt_loop(
    read_line: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> int:
    """
    Run the read-enhance-print loop.

    Args:
        read_line: Reads one line given a prompt string (defaults to input)
        write: Writes one message (defaults to print)

    Returns:
        Exit code (always 0)

    Notes:
        - Lines are not validated; an empty line still produces output
        - End of input and Ctrl+C end the loop the same way "exit" does
    """
    read_line = read_line or input
    write = write or print

    while True:
        try:
            line = read_line(INPUT_PROMPT)
        except (EOFError, KeyboardInterrupt):
            write(GOODBYE_MESSAGE)
            return 0

        if line.lower() == EXIT_COMMAND:
            write(GOODBYE_MESSAGE)
            return 0

        write("\n" + enhance_prompt(line))


def print_banner(serving: bool, port: int, serve_requested: bool = False) -> None:
    print(BANNER_RULE)
    print("AI Prompt Enhancer - CLI Mode")
    print(BANNER_RULE)
    print('Type your prompt or "exit" to quit')
    if serving:
        print(f"Server is also running on http://localhost:{port}")
    elif serve_requested:
        print(f"Server could not be started on port {port}; running CLI only")
    print(BANNER_RULE + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Enhance project prompts from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --serve
  %(prog)s --serve --port 8080
        """
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Also run the HTTP API in the background"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Port for --serve (default: PORT env var or {settings.PORT})"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    port = args.port if args.port is not None else settings.PORT
    serving = False

    if args.serve:
        # Keep app and server logs off the prompt line
        configure_logging(BACKGROUND_LOG_LEVEL)
        serving = start_in_background(port=port).is_alive()
        if not serving:
            logger.error(f"HTTP API failed to start on port {port}")

    print_banner(serving=serving, port=port, serve_requested=args.serve)
    return prompt_loop()


if __name__ == "__main__":
    sys.exit(main())
