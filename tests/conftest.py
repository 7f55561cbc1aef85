"""Shared fixtures and test doubles."""

from __future__ import annotations

import io

import pytest

from nl_shell.commands import CommandOutput
from nl_shell.context import Context
from nl_shell.logger import logger
from nl_shell.theme import create_console
from nl_shell.ui import UIManager


def ok(stdout: str = "") -> CommandOutput:
    return CommandOutput(success=True, status_code=0, stdout=stdout, stderr="")


def failed(stderr: str = "boom", status_code: int = 1) -> CommandOutput:
    return CommandOutput(success=False, status_code=status_code, stdout="", stderr=stderr)


class FakeExecutor:
    """Executor answering `exists` from a set of command names and replaying outputs."""

    def __init__(self, existing=(), outputs=None, default=None):
        self.existing = set(existing)
        self.outputs = list(outputs or [])
        self.default = default or ok()
        self.exists_calls: list[tuple[str, str]] = []
        self.executed: list[str] = []

    def exists(self, shell: str, command: str) -> bool:
        self.exists_calls.append((shell, command))
        return command.split()[0] in self.existing

    def execute(self, shell: str, command: str) -> CommandOutput:
        self.executed.append(command)
        if self.outputs:
            return self.outputs.pop(0)
        return self.default


class FakeModel:
    """Model replaying scripted replies and recording every call."""

    def __init__(self, resolve=(), correct=(), init="cat /etc/os-release"):
        self.resolve_replies = list(resolve)
        self.correct_replies = list(correct)
        self.init_reply = init
        self.init_calls: list[str] = []
        self.resolve_calls: list[str] = []
        self.correct_calls: list[tuple[str, str, CommandOutput]] = []

    def init_prompt(self, os_probe_output: str) -> str:
        self.init_calls.append(os_probe_output)
        return self.init_reply

    def resolve(self, context, user_input: str) -> str:
        self.resolve_calls.append(user_input)
        return self.resolve_replies.pop(0)

    def correct(self, context, user_input: str, command: str, output: CommandOutput) -> str:
        self.correct_calls.append((user_input, command, output))
        return self.correct_replies.pop(0)


class FakeTerminal:
    """Terminal replaying inputs and confirmation answers; exceptions are raised.

    Running out of inputs behaves like Ctrl+D.
    """

    def __init__(self, inputs=(), confirmations=()):
        self.inputs = list(inputs)
        self.confirmations = list(confirmations)
        self.prompts: list[tuple[str, list[str]]] = []
        self.confirm_requests: list[str] = []

    def get_input(self, pwd: str, history: list[str]) -> str:
        self.prompts.append((pwd, history))
        if not self.inputs:
            raise EOFError
        value = self.inputs.pop(0)
        if isinstance(value, BaseException) or isinstance(value, type):
            raise value
        return value

    def get_confirmation(self, command: str) -> bool:
        self.confirm_requests.append(command)
        value = self.confirmations.pop(0)
        if isinstance(value, BaseException) or isinstance(value, type):
            raise value
        return value


@pytest.fixture
def home(tmp_path, monkeypatch):
    """A fresh HOME directory, so history files never touch the real one."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside a scratch directory; the original cwd is restored afterwards."""
    directory = tmp_path / "work"
    directory.mkdir()
    monkeypatch.chdir(directory)
    return directory


@pytest.fixture
def context(home, workdir):
    return Context("Linux 6.1.0 x86_64\n", "/bin/bash", "Debian GNU/Linux\n 12 (bookworm)\n", persist_history=False)


@pytest.fixture
def ui():
    console = create_console(None, file=io.StringIO(), width=200, force_terminal=False)
    return UIManager(console=console)


def printed(ui: UIManager) -> str:
    return ui.console.file.getvalue()


@pytest.fixture
def debug_console_logging():
    """Show every log record on the terminal for the duration of a test."""
    logger.set_console_level("DEBUG")
    yield
    logger.set_console_level("WARNING")
