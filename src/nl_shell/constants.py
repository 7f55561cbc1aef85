#!/usr/bin/env python

"""Constants and configuration values for nl-shell"""

from pathlib import Path

# Application Information
APP_NAME = "nl-shell"
APP_DESCRIPTION = "A natural language shell for *NIX systems"
APP_VERSION = "0.1.0"

# File and Directory Constants
DEFAULT_CONFIG_FILE = "config.yaml"
HOME_DIR = Path.home()
CONFIG_DIR = HOME_DIR / ".config" / "nl-shell"
APP_DATA_DIR = HOME_DIR / ".nl-shell"
LOGS_DIR = APP_DATA_DIR / "logs"
LOG_FILE_NAME = "nl-shell.log"

CONFIG_FILE_PATH = CONFIG_DIR / DEFAULT_CONFIG_FILE

# File Size Limits
MAX_CONFIG_FILE_SIZE = 1024 * 1024  # 1MB

# Timeouts (in seconds)
API_TIMEOUT = 30

# Retry bound for model corrections of a failed command, per user input
MAX_RETRIES = 1

# Shell environment variable and the probe used to seed the context
SHELL_ENV_VAR = "SHELL"
UNAME_PROBE_COMMAND = "uname -smr"

# Native history file of each supported shell, relative to the home directory
SHELL_HISTORY_FILES = {
    "bash": ".bash_history",
    "zsh": ".zsh_history",
    "ksh": ".sh_history",
    "sh": ".sh_history",
    "tcsh": ".history",
}

# Some POSIX commands double as everyday verbs ("sort these files", "find my notes").
# When the first word of the input is one of these, the model decides what was meant.
COMMAND_EXCEPTIONS = frozenset([
    "alias", "cat", "diff", "expand", "find", "kill", "link",
    "list", "log", "print", "read", "sort", "split", "strip",
    "touch", "type", "what", "which", "who",
])

# Backend credentials and endpoints
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
ANTHROPIC_API_KEY_ENV = "ANTHROPIC_API_KEY"
LOCAL_URL_ENV = "NL_SHELL_LOCAL_URL"

DEFAULT_LOCAL_URL = "http://localhost:11434/v1"
DEFAULT_LOCAL_API_KEY = "ollama"

ANTHROPIC_MAX_TOKENS = 256

# Default Configuration
DEFAULT_CONFIG = {
    "models": {
        "gpt4": "gpt-4o",
        "gpt35": "gpt-3.5-turbo",
        "claude": "claude-3-5-sonnet-latest",
    },
    "local": {
        "url": DEFAULT_LOCAL_URL,
        "api_key": DEFAULT_LOCAL_API_KEY,
    },
    "settings": {
        "api_timeout": API_TIMEOUT,
        "persist_history": True,
        "show_welcome_message": True,
        "log_level": "WARNING",
    },
    "theme": {},
}

# Terminal prompt
PROMPT_PREFIX = "[nl-sh]"
CONFIRM_HELP = "execute this command?"
YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")

# Logging Configuration
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Command Exit Codes
SUCCESS_EXIT_CODE = 0
ERROR_EXIT_CODE = 1
