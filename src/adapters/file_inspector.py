"""Local file introspection for selected images.

Accepts `file://` URIs as well as plain filesystem paths.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from core.domain.errors import FileNotFound
from core.domain.models import FileInfo
from core.interfaces import FileInspector


def uri_to_path(uri: str) -> Path:
    """Resolve a `file://` URI or a plain path to a `Path`."""

    parsed = urlparse(uri)
    if parsed.scheme == "file":
        return Path(url2pathname(unquote(parsed.path)))
    return Path(uri).expanduser()


class LocalFileInspector(FileInspector):
    async def stat_file(self, uri: str) -> FileInfo:
        path = uri_to_path(uri)
        try:
            stat = await asyncio.to_thread(path.stat)
        except FileNotFoundError as exc:
            raise FileNotFound(uri) from exc
        if not path.is_file():
            raise FileNotFound(uri)
        return FileInfo(size_bytes=stat.st_size)
