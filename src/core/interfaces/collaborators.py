"""Contracts of the collaborators used by the profile workflows.

Structural (duck-typed) contracts: adapters and test doubles only need the
right methods, no inheritance.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.models import AvatarUpload, FileInfo, PickResult, Severity, UserProfile


@runtime_checkable
class SessionStore(Protocol):
    """Shared local session state holding the signed-in user."""

    def get_current_user(self) -> UserProfile:
        ...

    async def set_current_user(self, profile: UserProfile) -> None:
        """Replace the session user with a fully merged snapshot."""

        ...


@runtime_checkable
class ProfileApi(Protocol):
    """Remote profile service.

    Both calls fail with `AppError` when the server gives a reason, or with any
    other exception (network, timeout, unexpected response).
    """

    async def update_avatar(self, upload: AvatarUpload) -> dict[str, Any]:
        """Upload a new avatar as multipart field `avatar`; returns the JSON body."""

        ...

    async def update_profile(self, payload: dict[str, str]) -> None:
        ...


@runtime_checkable
class ImagePicker(Protocol):
    async def pick_image(self) -> PickResult:
        ...


@runtime_checkable
class FileInspector(Protocol):
    async def stat_file(self, uri: str) -> FileInfo:
        """Return the file's size; raises `FileNotFound` when it is missing."""

        ...


@runtime_checkable
class Notifier(Protocol):
    def notify(self, message: str, severity: Severity) -> None:
        """Show a transient message. Fire-and-forget."""

        ...
