#!/usr/bin/env python

"""
Heuristic deciding whether operator input is already a shell command.

A positive answer skips the model round trip for obvious native commands.
Inputs whose first word is also a common verb ("sort", "find", "who") always
go to the model, which is better placed to tell "sort data.txt" from
"sort my downloads by size".
"""

from typing import AbstractSet

from .constants import COMMAND_EXCEPTIONS


def first_word(user_input: str) -> str:
    """Lower-cased first whitespace-separated word of the input, or ''"""
    parts = user_input.split()
    return parts[0].lower() if parts else ""


def likely_system_command(context, user_input: str, executor,
                          exceptions: AbstractSet[str] = COMMAND_EXCEPTIONS) -> bool:
    """Return True when *user_input* should run as typed, without the model"""
    command_name = first_word(user_input)
    if not command_name or command_name in exceptions:
        return False

    return executor.exists(context.shell, user_input)
