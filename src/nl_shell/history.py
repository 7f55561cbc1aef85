#!/usr/bin/env python

"""
Command history backed by the user's native shell history file.

Entries are kept most recent first. Writing back to the shell's file only
happens when persistence was requested and the file could be read at startup;
otherwise the history lives in memory for the session.
"""

import os
import re
from collections import deque
from pathlib import Path
from typing import List

from .constants import SHELL_HISTORY_FILES
from .errors import UnsupportedShellError
from .logger import logger

# zsh EXTENDED_HISTORY lines look like ": 1700000000:0;git status"
ZSH_EXTENDED_ENTRY = re.compile(r"^: \d+:\d+;(.*)$")


def history_file_path(shell: str) -> Path:
    """Native history file for *shell*, looked up by the shell's name"""
    shell_name = os.path.basename(shell.rstrip("/"))
    try:
        file_name = SHELL_HISTORY_FILES[shell_name]
    except KeyError:
        raise UnsupportedShellError(f"Unsupported shell: {shell}") from None
    return Path.home() / file_name


def parse_history_line(line: str) -> str:
    """Strip the trailing newline and any zsh extended-history prefix"""
    line = line.rstrip("\n")
    match = ZSH_EXTENDED_ENTRY.match(line)
    return match.group(1) if match else line


class CommandHistory:
    def __init__(self, shell: str, persist: bool = True):
        self.backing_path = history_file_path(shell)
        self.persist = persist
        self._entries: deque = deque()
        self._load()

    def _load(self):
        try:
            with open(self.backing_path, "r", encoding="utf-8", errors="replace") as history_file:
                for line in history_file:
                    self._entries.appendleft(parse_history_line(line))
        except OSError as e:
            # Unreadable history never blocks startup; the session keeps it in memory
            logger.log_history_event(f"unavailable ({e.strerror or e})", self.backing_path)
            self.persist = False
            return

        logger.log_history_event(f"loaded {len(self._entries)} entries", self.backing_path)

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def append(self, command: str):
        """Record *command*, writing it to the shell's history file when persisting.

        Write failures propagate; the in-memory entry is only added after a
        successful write.
        """
        if self.persist:
            with open(self.backing_path, "a", encoding="utf-8") as history_file:
                history_file.write(command + "\n")
                history_file.flush()
            logger.log_history_event("appended", self.backing_path)

        self._entries.appendleft(command)

    def snapshot(self) -> List[str]:
        """Current entries, most recent first"""
        return list(self._entries)

    def __len__(self):
        return len(self._entries)
