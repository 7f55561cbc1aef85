#!/usr/bin/env python

import logging
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler

from .constants import LOGS_DIR, LOG_FILE_NAME, LOG_FORMAT, LOG_DATE_FORMAT


class NLShellLogger:
    """Centralized logging system for nl-shell"""

    _instance: Optional['NLShellLogger'] = None

    def __new__(cls) -> 'NLShellLogger':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._initialized = True
        self.console = Console(stderr=True)
        self.logger = logging.getLogger("nl-shell")
        self.console_handler: Optional[RichHandler] = None
        self._setup_logging()

    def _setup_logging(self):
        """Setup file and console handlers"""
        self.logger.setLevel(logging.DEBUG)

        # File log is best effort: a read-only home still gets console logging
        try:
            LOGS_DIR.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(LOGS_DIR / LOG_FILE_NAME)
        except OSError:
            file_handler = None

        if file_handler is not None:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
            self.logger.addHandler(file_handler)

        # Only warnings and errors reach the terminal by default; messages carry
        # raw command text, so they are never parsed as markup
        self.console_handler = RichHandler(
            console=self.console,
            show_time=False,
            show_path=False,
            markup=False
        )
        self.console_handler.setLevel(logging.WARNING)
        self.logger.addHandler(self.console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_console_level(self, level):
        """Change the threshold for messages shown on the terminal"""
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.WARNING
        if self.console_handler is not None:
            self.console_handler.setLevel(level)

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    def critical(self, message: str, **kwargs):
        self.logger.critical(message, **kwargs)

    def log_command_execution(self, command: str, success: bool, status_code: int, stderr: str = ""):
        """Log command execution details"""
        status = "SUCCESS" if success else "FAILED"
        self.info(f"Command {status} ({status_code}): {command}")
        if not success and stderr:
            self.debug(f"Command stderr: {stderr[:200]}")

    def log_model_request(self, backend: str, model: str, prompt_length: int, response_length: int):
        """Log model request details"""
        self.debug(f"Model Request - {backend}/{model}: prompt {prompt_length} chars, response {response_length} chars")

    def log_history_event(self, event: str, path):
        """Log history file events"""
        self.debug(f"History {event}: {path}")


# Global logger instance
logger = NLShellLogger()
