"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.session_store import NoActiveSession, load_session_profile
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("/")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


def _check_session(settings: AppSettings) -> tuple[bool, str]:
    try:
        profile = load_session_profile(settings.session_path)
    except NoActiveSession as exc:
        return False, str(exc)
    except ValueError as exc:
        return False, f"Unreadable session file: {exc}"
    return True, f"{profile.name} <{profile.email}>"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Profile Editor Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)
    if settings.api_token:
        table.add_row("API token", "OK", "Bearer token configured")
    else:
        table.add_row("API token", "MISSING", "Run `profile-editor doctor configure`")

    ok_session, detail_session = _check_session(settings)
    table.add_row("Session", "OK" if ok_session else "FAIL", detail_session)

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("API connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_session:
        _console.print(
            f"\n[yellow]Note:[/yellow] sign in first; the session is read from {settings.session_path}."
        )


@app.command()
def configure() -> None:
    """Interactive API setup (stores config in the user config .env)."""

    settings = AppSettings()

    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()
    api_token = typer.prompt("API token", hide_input=True, default="", show_default=False).strip()

    if not base_url:
        raise typer.BadParameter("base_url is required")

    env_path = write_user_env_vars(
        {
            "PROFILE_EDITOR_API_BASE_URL": base_url,
            "PROFILE_EDITOR_API_TOKEN": api_token or None,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
