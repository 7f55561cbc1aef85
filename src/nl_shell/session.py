#!/usr/bin/env python

"""
The interactive session loop.

Each line of input moves through a small state machine:

    READ_INPUT -> CLASSIFY -> [MODEL_RESOLVE] -> CONFIRM -> EXECUTE
        EXECUTE ok     -> context update -> READ_INPUT
        EXECUTE failed -> MAYBE_RETRY -> CONFIRM (at most `max_retries` times)

Cancelling at either prompt (Ctrl+C / Ctrl+D) ends the session cleanly.
Model and spawn errors propagate out of `run`.
"""

from enum import Enum, auto
from typing import AbstractSet, Optional

from .classifier import likely_system_command
from .commands import CommandOutput
from .constants import COMMAND_EXCEPTIONS, MAX_RETRIES
from .errors import DirectoryChangeError
from .logger import logger


class State(Enum):
    READ_INPUT = auto()
    CLASSIFY = auto()
    MODEL_RESOLVE = auto()
    CONFIRM = auto()
    EXECUTE = auto()
    MAYBE_RETRY = auto()
    EXIT = auto()


class ShellSession:
    """Runs the read / resolve / confirm / execute loop over one Context"""

    def __init__(self, context, model, executor, terminal_input, ui,
                 exceptions: AbstractSet[str] = COMMAND_EXCEPTIONS,
                 max_retries: int = MAX_RETRIES):
        self.context = context
        self.model = model
        self.executor = executor
        self.terminal_input = terminal_input
        self.ui = ui
        self.exceptions = exceptions
        self.max_retries = max_retries
        self._reset()

    def _reset(self):
        """Clear per-input state"""
        self.user_input = ""
        self.command = ""
        self.direct = False
        self.retries = 0
        self.output: Optional[CommandOutput] = None

    def run(self):
        """Main session loop; returns when the operator cancels"""
        state = State.READ_INPUT
        while state is not State.EXIT:
            state = self.step(state)
        self.ui.show_goodbye()

    def step(self, state: State) -> State:
        """Perform one transition and return the next state"""
        handler = {
            State.READ_INPUT: self._read_input,
            State.CLASSIFY: self._classify,
            State.MODEL_RESOLVE: self._model_resolve,
            State.CONFIRM: self._confirm,
            State.EXECUTE: self._execute,
            State.MAYBE_RETRY: self._maybe_retry,
        }[state]
        return handler()

    def _read_input(self) -> State:
        self._reset()
        try:
            user_input = self.terminal_input.get_input(self.context.pwd, self.context.snapshot_history())
        except (KeyboardInterrupt, EOFError):
            return State.EXIT

        if not user_input or not user_input.strip():
            return State.READ_INPUT

        self.user_input = user_input
        return State.CLASSIFY

    def _classify(self) -> State:
        self.direct = likely_system_command(self.context, self.user_input, self.executor, self.exceptions)
        if self.direct:
            self.command = self.user_input
            return State.CONFIRM
        return State.MODEL_RESOLVE

    def _model_resolve(self) -> State:
        with self.ui.console.status("[bold][accent]Thinking...[/accent][/bold]"):
            self.command = self.model.resolve(self.context, self.user_input)
        return State.CONFIRM

    def _confirm(self) -> State:
        # Typing a real command never asks for confirmation
        if self.command == self.user_input:
            return State.EXECUTE

        if not self.command.strip():
            self.ui.show_could_not_interpret()
            return State.READ_INPUT

        if self.retries == 0:
            self.ui.console.print()
        try:
            approved = self.terminal_input.get_confirmation(self.command)
        except (KeyboardInterrupt, EOFError):
            return State.EXIT

        if not approved:
            logger.debug(f"Operator declined: {self.command}")
            self.ui.show_aborted()
            return State.READ_INPUT
        return State.EXECUTE

    def _execute(self) -> State:
        self.output = self.executor.execute(self.context.shell, self.command)

        if self.output.success:
            self.ui.show_output(self.output.stdout)
            try:
                self.context.update(self.command)
            except DirectoryChangeError as e:
                self.ui.show_warning(str(e))
            return State.READ_INPUT

        self.ui.show_command_failure(self.command, self.output.stderr)
        # Literal commands are the operator's to fix
        if self.direct:
            return State.READ_INPUT
        return State.MAYBE_RETRY

    def _maybe_retry(self) -> State:
        if self.retries >= self.max_retries:
            return State.READ_INPUT

        if self.retries == 0:
            self.ui.show_retrying()
        self.retries += 1
        with self.ui.console.status("[bold][accent]Thinking...[/accent][/bold]"):
            self.command = self.model.correct(self.context, self.user_input, self.command, self.output)
        return State.CONFIRM
