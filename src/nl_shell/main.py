#!/usr/bin/env python
"""
nl-shell - Main Entry Point

An interactive shell that takes either POSIX commands or plain-language
requests. Requests are turned into a command line by a language model,
confirmed with the operator, and run in the user's own shell. A failed
suggestion gets one model-assisted correction.

Usage:
    nl-shell [--gpt4 | --claude | --gpt35 | --local MODEL] [--stateless]

Configuration:
    ~/.config/nl-shell/config.yaml (optional)
    SHELL, OPENAI_API_KEY, ANTHROPIC_API_KEY environment variables
"""

import argparse
import sys

from .app import NLShellApp
from .constants import APP_NAME, APP_DESCRIPTION, APP_VERSION, SUCCESS_EXIT_CODE, ERROR_EXIT_CODE
from .logger import logger


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("--gpt4", action="store_true",
                        help="Use the GPT-4 API as a backend, reading OPENAI_API_KEY (default)")
    parser.add_argument("--claude", action="store_true",
                        help="Use the Anthropic Claude API as a backend, reading ANTHROPIC_API_KEY")
    parser.add_argument("--gpt35", action="store_true",
                        help="Use the GPT-3.5 API as a backend, reading OPENAI_API_KEY")
    parser.add_argument("--local", metavar="MODEL",
                        help="Use MODEL as named by a local OpenAI-compatible server (e.g. an Ollama tag)")
    parser.add_argument("--stateless", action="store_true",
                        help="Disable update of external shell history")
    parser.add_argument("--config", metavar="PATH", help="Path to the YAML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging on the terminal")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Main entry point for nl-shell"""
    args = parse_args(argv)
    app = NLShellApp()

    try:
        app.initialize(args)
        app.run()
    except KeyboardInterrupt:
        app.ui.show_goodbye()
        sys.exit(SUCCESS_EXIT_CODE)
    except Exception as e:
        logger.debug(f"Fatal error: {e!r}")
        app.ui.show_error(f"Fatal error: {e}")
        sys.exit(ERROR_EXIT_CODE)


if __name__ == "__main__":
    main()
