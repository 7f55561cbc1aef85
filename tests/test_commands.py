"""Tests for command execution through the user's shell."""

from __future__ import annotations

import subprocess

import pytest

from nl_shell.commands import CommandExecutor, CommandOutput, build_probe_command, get_prompt_directory

SHELL = "/bin/sh"


def _completed(returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[SHELL], returncode=returncode, stdout=stdout, stderr=stderr)


def test_output_from_successful_process() -> None:
    output = CommandOutput.from_completed(_completed(0, b"hello\n"))

    assert output == CommandOutput(success=True, status_code=0, stdout="hello\n", stderr="")


def test_signal_termination_has_no_status_code() -> None:
    output = CommandOutput.from_completed(_completed(-9))

    assert output.success is False
    assert output.status_code == -1


def test_invalid_utf8_is_an_error() -> None:
    with pytest.raises(UnicodeDecodeError):
        CommandOutput.from_completed(_completed(0, b"\xff\xfe"))

    with pytest.raises(UnicodeDecodeError):
        CommandOutput.from_completed(_completed(1, b"", b"\xc3"))


def test_probe_quotes_every_word() -> None:
    assert build_probe_command("ls -la") == "command -v ls -la"
    assert build_probe_command("ls; touch x") == "command -v 'ls;' touch x"
    assert build_probe_command("echo $(id)") == "command -v echo '$(id)'"


def test_exists_finds_shell_commands() -> None:
    executor = CommandExecutor()

    assert executor.exists(SHELL, "ls")
    assert executor.exists(SHELL, "cd")
    assert not executor.exists(SHELL, "definitely-not-a-command-nl-shell")
    assert not executor.exists(SHELL, "")


def test_exists_is_false_when_shell_cannot_run() -> None:
    assert not CommandExecutor().exists("/nonexistent/shell", "ls")


def test_exists_never_runs_the_input(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    CommandExecutor().exists(SHELL, "ls; touch created-by-probe")
    CommandExecutor().exists(SHELL, "ls $(touch created-by-substitution)")

    assert list(tmp_path.iterdir()) == []


def test_execute_captures_output() -> None:
    output = CommandExecutor().execute(SHELL, "echo out; echo err >&2")

    assert output.success is True
    assert output.status_code == 0
    assert output.stdout == "out\n"
    assert output.stderr == "err\n"


def test_execute_reports_non_zero_exit() -> None:
    output = CommandExecutor().execute(SHELL, "echo nope >&2; exit 3")

    assert output.success is False
    assert output.status_code == 3
    assert output.stderr == "nope\n"


def test_execute_rejects_undecodable_output() -> None:
    with pytest.raises(UnicodeDecodeError):
        CommandExecutor().execute(SHELL, r"printf '\377'")


def test_execute_spawn_failure_propagates() -> None:
    with pytest.raises(OSError):
        CommandExecutor().execute("/nonexistent/shell", "ls")


def test_prompt_directory_abbreviates_home(home) -> None:
    assert get_prompt_directory(str(home)) == "~"
    assert get_prompt_directory(str(home / "src")) == "~/src"
    assert get_prompt_directory("/tmp") == "/tmp"


def test_prompt_directory_shortens_long_paths() -> None:
    long_path = "/very/long/directory/structure/that/keeps/going/and/going"

    assert get_prompt_directory(long_path) == "/.../and/going"


def test_debug_logging_keeps_brackets_in_commands_literal(debug_console_logging) -> None:
    output = CommandExecutor().execute(SHELL, "echo '[/x]'")

    assert output.success is True
    assert output.stdout == "[/x]\n"
