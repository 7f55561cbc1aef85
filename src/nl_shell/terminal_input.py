#!/usr/bin/env python

"""
Terminal input handler using prompt_toolkit.
Provides line editing and recall of past commands from the session history.
"""

import html
from typing import List

from prompt_toolkit import prompt
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from .commands import get_prompt_directory
from .constants import PROMPT_PREFIX, CONFIRM_HELP, YES_ANSWERS, NO_ANSWERS
from .theme import get_theme


class TerminalInput:
    """Reads operator input and yes/no confirmations"""

    def __init__(self, config: dict):
        self.config = config
        self.style = self._build_style()

    def _build_style(self) -> Style:
        theme = get_theme(self.config)
        return Style.from_dict({
            'prompt.prefix': f"{theme['accent']} bold",
            'prompt.path': theme['muted'],
            'prompt.command': f"{theme['command']} bold",
            'prompt.help': theme['muted'],
        })

    def _build_prompt(self, pwd: str) -> HTML:
        path = html.escape(get_prompt_directory(pwd))
        return HTML(
            f'<prompt.prefix>{html.escape(PROMPT_PREFIX)}</prompt.prefix> '
            f'<prompt.path>{path}</prompt.path> <prompt.prefix>$</prompt.prefix> '
        )

    def get_input(self, pwd: str, history: List[str]) -> str:
        """Read one line of input.

        *history* is ordered most recent first, as the session keeps it.
        Raises KeyboardInterrupt or EOFError when the operator cancels.
        """
        # InMemoryHistory expects oldest first
        recall = InMemoryHistory(list(reversed(history)))
        user_input = prompt(
            self._build_prompt(pwd),
            history=recall,
            style=self.style,
        )
        return user_input.strip()

    def get_confirmation(self, command: str, default: bool = True) -> bool:
        """Ask whether *command* should run.

        Empty input takes the default; anything unrecognized asks again.
        Raises KeyboardInterrupt or EOFError when the operator cancels.
        """
        hint = "[Y/n]" if default else "[y/N]"
        message = HTML(
            f'<prompt.command>{html.escape(command)}</prompt.command> '
            f'<prompt.help>{html.escape(CONFIRM_HELP)} {hint}</prompt.help> '
        )
        while True:
            answer = prompt(message, style=self.style).strip().lower()
            if not answer:
                return default
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
