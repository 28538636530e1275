"""Terminal image picker.

Uses the path given on the command line, or asks for one. An empty answer
means the user backed out, which is a cancellation, not an error.
"""

from __future__ import annotations

import asyncio
import mimetypes
from typing import Callable

import typer

from core.domain.models import PickCancelled, PickResult, PickSelected
from core.interfaces import ImagePicker


def _prompt_for_path() -> str:
    return typer.prompt("Image path (leave empty to cancel)", default="", show_default=False)


def guess_mime_hint(path: str) -> str:
    guessed, _ = mimetypes.guess_type(path)
    if guessed and guessed.startswith("image/"):
        return guessed
    return "image"


class PathImagePicker(ImagePicker):
    def __init__(self, path: str | None = None, *, prompt: Callable[[], str] = _prompt_for_path) -> None:
        self._path = path
        self._prompt = prompt

    async def pick_image(self) -> PickResult:
        path = self._path
        if path is None:
            path = await asyncio.to_thread(self._prompt)
        path = (path or "").strip()
        if not path:
            return PickCancelled()
        return PickSelected(uri=path, mime_type_hint=guess_mime_hint(path))
