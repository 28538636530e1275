"""Command-line front end of the profile editor."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.console_notifier import ConsoleNotifier
from adapters.file_inspector import LocalFileInspector
from adapters.image_picker import PathImagePicker
from adapters.profile_api import HttpProfileApi, avatar_url
from adapters.session_store import JsonSessionStore, NoActiveSession
from cli import doctor
from cli.ui_components import (
    build_field_errors_table,
    build_profile_table,
    configure_logging,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import FormPayload
from core.services.photo_upload import PhotoUploadStatus
from core.services.profile_editor import ProfileEditor

app = typer.Typer(no_args_is_help=True, help="Edit the signed-in user's name, password and photo.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide the banner."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    if not quiet:
        print_banner(_console)


def _build_editor(settings: AppSettings, *, image_path: str | None = None) -> ProfileEditor:
    try:
        session = JsonSessionStore.load(settings.session_path)
    except NoActiveSession as exc:
        _console.print(f"[red]{exc}[/red]\nSign in first, then try again.")
        raise typer.Exit(code=1) from exc

    return ProfileEditor(
        session=session,
        api=HttpProfileApi(settings),
        picker=PathImagePicker(image_path),
        inspector=LocalFileInspector(),
        notifier=ConsoleNotifier(_console),
        settings=settings,
    )


@app.command()
def show() -> None:
    """Show the current profile."""

    settings = AppSettings()
    editor = _build_editor(settings)
    profile = editor.current_user
    _console.print(build_profile_table(profile, avatar_url=avatar_url(profile, settings)))


@app.command()
def update(
    name: str | None = typer.Option(None, "--name", help="New display name (prompted when omitted)."),
    change_password: bool = typer.Option(False, "--change-password", help="Also set a new password."),
) -> None:
    """Update the display name and, optionally, the password."""

    settings = AppSettings()
    editor = _build_editor(settings)
    defaults = editor.form_defaults()

    if name is None:
        name = typer.prompt("Name", default=defaults.name)

    old_password = password = confirm_password = None
    if change_password:
        old_password = typer.prompt("Old password", hide_input=True, default="", show_default=False)
        password = typer.prompt("New password", hide_input=True, default="", show_default=False)
        confirm_password = typer.prompt("Confirm new password", hide_input=True, default="", show_default=False)

    payload = FormPayload(
        name=name,
        email=defaults.email,
        old_password=old_password,
        password=password,
        confirm_password=confirm_password,
    )
    outcome = asyncio.run(editor.submit_form(payload))

    if outcome.field_errors:
        _console.print(build_field_errors_table(outcome.field_errors))
        raise typer.Exit(code=2)
    if not outcome.ok:
        raise typer.Exit(code=1)

    _console.print(build_profile_table(editor.current_user, avatar_url=avatar_url(editor.current_user, settings)))


@app.command()
def photo(
    path: str | None = typer.Argument(None, help="Image file to upload (prompted when omitted)."),
) -> None:
    """Replace the avatar with a local image (up to the configured size limit)."""

    settings = AppSettings()
    editor = _build_editor(settings, image_path=path)
    outcome = asyncio.run(editor.change_photo())

    if outcome.status is PhotoUploadStatus.CANCELLED:
        return
    if outcome.status is not PhotoUploadStatus.UPDATED:
        raise typer.Exit(code=1)

    _console.print(build_profile_table(editor.current_user, avatar_url=avatar_url(editor.current_user, settings)))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
