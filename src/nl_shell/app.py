#!/usr/bin/env python

import os
from typing import Optional, Dict, Any

from .commands import CommandExecutor
from .config import load_config, get_command_exceptions
from .constants import SHELL_ENV_VAR, UNAME_PROBE_COMMAND
from .context import Context
from .errors import StartupError
from .logger import logger
from .models import Model, build_model, select_model_type
from .session import ShellSession
from .terminal_input import TerminalInput
from .ui import UIManager


def initialize_context(model: Model, executor: CommandExecutor, persist_history: bool = True,
                       environ: Optional[Dict[str, str]] = None) -> Context:
    """Probe the environment and build the session Context.

    The model picks the best OS description command for this `uname`; both
    probes run in the user's shell and must succeed.
    """
    environ = os.environ if environ is None else environ
    shell = environ.get(SHELL_ENV_VAR)
    if not shell:
        raise StartupError(f"${SHELL_ENV_VAR} is not set")

    uname_output = executor.execute(shell, UNAME_PROBE_COMMAND)
    if not uname_output.success:
        raise StartupError(f"'{UNAME_PROBE_COMMAND}' failed: {uname_output.stderr.strip()}")

    os_command = model.init_prompt(uname_output.stdout)
    if not os_command.strip():
        raise StartupError("The model did not suggest an OS probe command")

    os_output = executor.execute(shell, os_command)
    if not os_output.success:
        raise StartupError(f"OS probe '{os_command}' failed: {os_output.stderr.strip()}")

    logger.info(f"Session shell {shell}, OS probe '{os_command}'")
    return Context(uname_output.stdout, shell, os_output.stdout, persist_history)


class NLShellApp:
    """Main application class for nl-shell"""

    def __init__(self, ui: Optional[UIManager] = None):
        self.ui = ui or UIManager()
        self.config: Optional[Dict[str, Any]] = None
        self.model: Optional[Model] = None
        self.executor = CommandExecutor()
        self.context: Optional[Context] = None
        self.session: Optional[ShellSession] = None

    def initialize(self, args):
        """Load configuration, build the model backend and probe the environment"""
        self.config = load_config(args.config)
        settings = self.config["settings"]
        self.ui = UIManager(self.config)
        logger.set_console_level("DEBUG" if args.verbose else settings.get("log_level", "WARNING"))

        model_type = select_model_type(local=args.local, gpt35=args.gpt35, claude=args.claude)
        logger.info(f"Using {model_type.value} backend")
        self.model = build_model(model_type, self.config, local_path=args.local)

        persist_history = settings.get("persist_history", True) and not args.stateless
        with self.ui.console.status("[bold][accent]Inspecting system...[/accent][/bold]"):
            self.context = initialize_context(self.model, self.executor, persist_history)

        self.session = ShellSession(
            self.context,
            self.model,
            self.executor,
            TerminalInput(self.config),
            self.ui,
            exceptions=get_command_exceptions(self.config),
        )

        if settings.get("show_welcome_message", True):
            self.ui.show_welcome(model_type.value)

    def run(self):
        """Run the interactive session"""
        assert self.session is not None, "Application not properly initialized"
        self.session.run()
