#!/usr/bin/env python

"""Prompt text sent to the model backends"""


def build_init_prompt(uname_output: str) -> str:
    """Ask for the best command to describe the operating system in more detail"""
    return f"""You are being asked to provide a POSIX-compatible command line sequence to gather information about the underlying operating system variant and version.
The underlying details according to the command "uname -smr" include:
  "{uname_output.strip()}"
Respond only with the specific command-line details to satisfy the request, with no additional context or explanation. Be terse and exact.
Since commands differ on various *NIX systems, ensure the command is valid in the environment detailed above.
For example:
  On a Darwin UNIX system, an appropriate command might be "sw_vers".
  On a GNU/Linux system, the right command might be "hostnamectl" or "cat /etc/os-release".
Provide the command."""


def build_command_prompt(context, user_input: str) -> str:
    """Ask for the command line that satisfies the operator's request"""
    return f"""You are being asked to provide a POSIX-compatible command line sequence to satisfy a user's prompt.
The command line arguments should be compatible with the user's operating system.
The underlying kernel and system details according to "uname -smr" include "{context.uname}"
Further operating system details include "{context.os}"
The user's underlying shell is "{context.shell}"
The user's current working directory according to "pwd" is "{context.pwd}"
Respond only with the specific command-line details to satisfy the request, with no additional context or explanation. Be terse and exact.
Since commands differ on various *NIX systems, ensure the command is valid in the environment detailed above.
Here are a few examples, on a Darwin-based UNIX system:
  User: "Show me details about all running processes on this system"
    Your response: "ps aux"
  User: "Show me all files in the current directory with human-readable file sizes and permission details"
    Your response: "ls -lha"
  User: "Show me a summary of Mike's commits in this git repository; show line additions and subtractions to each file in each commit"
    Your response: "git log --stat --summary --author='Mike'"
If the prompt is already a valid *NIX command for the user's system, then just return the original input.
If the prompt is an incoherent request for a POSIX-style command, return an empty string.
If the prompt is a command sequence for a different *NIX system, return the right combination of commands and flags to satisfy the request on the current system.
If the user's intention requires superuser privileges, ensure to prefix the command with 'sudo' or an appropriate equivalent given the operating system.
Here is the user's prompt:
  "{user_input}\""""


def build_correction_prompt(context, user_input: str, command: str, output) -> str:
    """Ask for a revised command after *command* failed with *output*"""
    return f"""In an earlier conversation, the following prompt was given:
{build_command_prompt(context, user_input)}

This resulted in the following proposed command: {command}
Executing that proposal on this system resulted in failure, with this status code: "{output.status_code}" and this stderr output: "{output.stderr.strip()}"
Given that, suggest an updated command given the constraints of this system's stated environment and the intent of the user.
Follow all earlier instructions; specifically, emit only the command with no additional context or explanation."""
