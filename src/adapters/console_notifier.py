"""Notifications rendered in the terminal with Rich."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.models import Severity
from core.interfaces import Notifier

_STYLES: dict[Severity, str] = {
    Severity.SUCCESS: "green",
    Severity.ERROR: "red",
}


class ConsoleNotifier(Notifier):
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def notify(self, message: str, severity: Severity) -> None:
        style = _STYLES.get(severity, "white")
        self._console.print(Panel(Text(message, style=f"bold {style}"), border_style=style, expand=False))
