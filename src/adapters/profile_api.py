"""Remote profile API (HTTP).

Endpoints:
- `PATCH /users/avatar`: multipart upload, field `avatar`; answers `{"avatar": "<file>"}`.
- `PUT /users`: JSON body `{name, old_password?, password?, confirm_password?}`.

Error responses carrying a JSON `message` become `AppError`; everything else
(network errors, timeouts, bare HTTP errors) propagates as raised by httpx.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from adapters.file_inspector import uri_to_path
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import AppError
from core.domain.models import AvatarUpload, UserProfile
from core.interfaces import ProfileApi


def raise_for_api_error(response: httpx.Response) -> None:
    """Raise `AppError` with the server's reason, or the plain HTTP error."""

    if not response.is_error:
        return

    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            raise AppError(message.strip(), status_code=response.status_code)

    response.raise_for_status()


def avatar_url(profile: UserProfile, settings: AppSettings | None = None) -> str | None:
    """Public URL of the profile's avatar, or None when it has none."""

    if not profile.avatar:
        return None
    settings = settings or AppSettings()
    return f"{settings.api_base_url.rstrip('/')}/avatar/{profile.avatar}"


class HttpProfileApi(ProfileApi):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return build_async_client(self._settings, transport=self._transport)

    async def update_avatar(self, upload: AvatarUpload) -> dict[str, Any]:
        content = await asyncio.to_thread(uri_to_path(upload.uri).read_bytes)
        files = {"avatar": (upload.name, content, upload.mime_type)}

        async with self._client() as client:
            response = await client.patch("/users/avatar", files=files)

        raise_for_api_error(response)
        return response.json()

    async def update_profile(self, payload: dict[str, str]) -> None:
        async with self._client() as client:
            response = await client.put("/users", json=payload)

        raise_for_api_error(response)
