#!/usr/bin/env python

import os
import re
from typing import List

from .errors import DirectoryChangeError
from .history import CommandHistory

WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_output(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends"""
    return WHITESPACE_RUN.sub(" ", text.strip())


def get_current_working_dir() -> str:
    return os.getcwd()


class Context:
    """Environment facts about the shell session, plus its command history.

    `shell`, `os` and `uname` are fixed at startup. `pwd` only moves when a
    successful `cd` goes through `update`.
    """

    def __init__(self, uname: str, shell: str, os_info: str, persist_history: bool = True):
        self.uname = sanitize_output(uname)
        self.shell = shell
        self.os = sanitize_output(os_info)
        self.pwd = get_current_working_dir()
        self.history = CommandHistory(shell, persist_history)

    def update(self, command: str):
        """Follow a successful command's effect on the session.

        A `cd <dir>` moves this process into <dir>. The original command is
        always recorded in history last, even when the directory change fails.
        """
        try:
            parts = command.split()
            if len(parts) > 1 and parts[0].lower() == "cd":
                self._change_directory(parts[1])
        finally:
            self.history.append(command)

    def _change_directory(self, target: str):
        try:
            os.chdir(os.path.expanduser(target))
        except OSError as e:
            raise DirectoryChangeError(target, e.strerror or str(e)) from e
        self.pwd = get_current_working_dir()

    def snapshot_history(self) -> List[str]:
        return self.history.snapshot()
