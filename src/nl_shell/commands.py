#!/usr/bin/env python

import os
import shlex
import subprocess
from dataclasses import dataclass

from .logger import logger


@dataclass(frozen=True)
class CommandOutput:
    """Exit status and captured text of a finished shell command"""
    success: bool
    status_code: int
    stdout: str
    stderr: str

    @classmethod
    def from_completed(cls, process: subprocess.CompletedProcess) -> "CommandOutput":
        """Build from a finished process, decoding its output as UTF-8.

        Undecodable output raises UnicodeDecodeError instead of being replaced.
        A negative return code (killed by a signal) is reported as -1.
        """
        stdout = process.stdout.decode("utf-8")
        stderr = process.stderr.decode("utf-8")
        status_code = process.returncode if process.returncode >= 0 else -1
        return cls(
            success=process.returncode == 0,
            status_code=status_code,
            stdout=stdout,
            stderr=stderr,
        )


def build_probe_command(command: str) -> str:
    """Shell line asking whether the words of *command* name runnable commands"""
    words = [shlex.quote(word) for word in command.split()]
    return "command -v " + " ".join(words)


class CommandExecutor:
    """Runs probes and command lines through the user's shell"""

    def exists(self, shell: str, command: str) -> bool:
        """Check whether *command* resolves via `$SHELL -c 'command -v ...'`.

        Any failure to run the probe counts as "does not exist".
        """
        if not command.strip():
            return False

        try:
            process = subprocess.run(
                [shell, "-c", build_probe_command(command)],
                stdin=subprocess.DEVNULL,
                capture_output=True,
            )
            return CommandOutput.from_completed(process).success
        except (OSError, ValueError) as e:
            logger.debug(f"Probe for '{command}' failed: {e}")
            return False

    def execute(self, shell: str, command: str) -> CommandOutput:
        """Run *command* as `$SHELL -c <command>` and capture its output.

        A non-zero exit is a normal CommandOutput; spawn failures (OSError)
        and undecodable output (UnicodeDecodeError) propagate.
        """
        process = subprocess.run([shell, "-c", command], capture_output=True)
        output = CommandOutput.from_completed(process)
        logger.log_command_execution(command, output.success, output.status_code, output.stderr)
        return output


def get_prompt_directory(current_dir: str) -> str:
    """Get a formatted directory for the prompt (shortened if needed)"""
    home_dir = os.path.expanduser("~")

    # Replace home directory with ~
    if current_dir == home_dir or current_dir.startswith(home_dir + os.sep):
        display_dir = "~" + current_dir[len(home_dir):]
    else:
        display_dir = current_dir

    # Shorten very long paths
    if len(display_dir) > 40:
        parts = display_dir.split(os.sep)
        if len(parts) > 3:
            display_dir = os.sep.join([parts[0], "...", parts[-2], parts[-1]])

    return display_dir
