"""CLI UI components (Rich).

Keeps visual details out of the command functions so tables and panels can be
reused by several commands.
"""

from __future__ import annotations

import logging

from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import FieldErrors
from core.domain.models import UserProfile


def configure_logging(level: str, console: Console | None = None) -> None:
    """Route the standard `logging` records through Rich."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def print_banner(console: Console) -> None:
    title = Text("Profile Editor", style="bold green")
    subtitle = Text("Name • Password • Photo", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(1, 4)))


def build_profile_table(profile: UserProfile, *, avatar_url: str | None = None) -> Table:
    table = Table(title="Profile", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("ID", profile.id)
    table.add_row("Name", profile.name)
    table.add_row("E-mail", profile.email)
    table.add_row("Avatar", avatar_url or Text("default photo", style="dim"))
    return table


def build_field_errors_table(errors: FieldErrors) -> Table:
    """One row per invalid input, in form order."""

    order = ("name", "old_password", "password", "confirm_password")
    table = Table(title="Please fix the following", title_style="bold red")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Problem", style="red")
    for name in sorted(errors, key=lambda f: order.index(f) if f in order else len(order)):
        table.add_row(name, errors[name].message)
    return table
