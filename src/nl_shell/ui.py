#!/usr/bin/env python

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .constants import APP_NAME, APP_VERSION
from .theme import create_console, get_theme


class UIManager:
    def __init__(self, config=None, console: Console | None = None):
        self.theme = get_theme(config or {})
        self.console = console or create_console(config)
        self._t = self.theme

    def show_welcome(self, backend: str = ""):
        """Display welcome message"""
        backend_line = f"\nModel backend: [accent_alt]{escape(backend)}[/accent_alt]" if backend else ""
        welcome_text = f"""[bold][accent]{APP_NAME} {APP_VERSION}[/accent][/bold]
Type a shell command, or describe what you want done in plain words.
Suggested commands are shown for confirmation before they run.{backend_line}

[muted]Ctrl+C or Ctrl+D to exit[/muted]"""

        self.console.print(Panel(welcome_text, title="Welcome", border_style=self._t["accent"]))

    def show_output(self, stdout: str):
        """Print a command's captured stdout, keeping its ANSI colors"""
        if not stdout:
            return
        self.console.print(Text.from_ansi(stdout), end="" if stdout.endswith("\n") else "\n", soft_wrap=True)

    def show_command_failure(self, command: str, stderr: str):
        self.console.print(
            f"[error]Executed \\[{escape(command)}] and got error:[/error] {escape(stderr.rstrip())}"
        )

    def show_could_not_interpret(self):
        self.console.print("\n[warning]could not interpret request[/warning]")

    def show_aborted(self):
        self.console.print("[muted]Aborting command[/muted]")

    def show_retrying(self):
        self.console.print("[warning]Retrying command formulation...[/warning]")

    def show_warning(self, message: str):
        self.console.print(f"[warning]{escape(message)}[/warning]")

    def show_error(self, message: str):
        """Display error message"""
        self.console.print(f"[bold][error]Error:[/error][/bold] {escape(message)}")

    def show_goodbye(self):
        self.console.print("\n[muted]exiting[/muted]")
