#!/usr/bin/env python

"""
Color palette shared by the rich console output and the prompt_toolkit prompt.

Any key under `theme:` in config.yaml replaces the matching default color.
"""

from typing import Optional

from rich.console import Console
from rich.theme import Theme as RichTheme

DEFAULT_THEME = {
    "accent": "#0066cc",
    "accent_alt": "#00cc66",
    "command": "cyan",
    "muted": "#666666",
    "error": "#ff5555",
    "warning": "#e5c07b",
    "success": "#00cc66",
}


def get_theme(config: Optional[dict]) -> dict:
    palette = dict(DEFAULT_THEME)
    if config:
        palette.update(config.get("theme") or {})
    return palette


def build_rich_theme(palette: dict) -> RichTheme:
    """Register each palette color as a named rich style.

    The styles carry color only; nest a ``[bold]`` tag around them for weight.
    """
    return RichTheme({name: palette[name] for name in DEFAULT_THEME})


def create_console(config: Optional[dict] = None, **kwargs) -> Console:
    """Console using the configured palette; *kwargs* go straight to rich."""
    return Console(theme=build_rich_theme(get_theme(config)), **kwargs)
