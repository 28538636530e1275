"""Session state backed by a JSON file.

The signed-in user's snapshot is kept in memory and written to disk (UTF-8,
stable formatting) on every update. Creating the file at sign-in and removing
it at sign-out belong to the auth layer.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from core.domain.models import UserProfile
from core.interfaces import SessionStore

logger = logging.getLogger(__name__)


class NoActiveSession(Exception):
    """No signed-in user is stored."""


def load_session_profile(path: Path) -> UserProfile:
    if not path.exists():
        raise NoActiveSession(f"No session file at {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    return UserProfile.model_validate(data)


def write_session_profile(*, profile: UserProfile, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = profile.model_dump(mode="json")
    # Readers only ever see the old file or the complete new one.
    tmp_path = output_path.with_name(output_path.name + ".tmp")
    tmp_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    tmp_path.replace(output_path)
    return output_path


class JsonSessionStore(SessionStore):
    def __init__(self, path: Path, profile: UserProfile | None = None) -> None:
        self._path = path
        self._profile = profile

    @classmethod
    def load(cls, path: Path) -> "JsonSessionStore":
        return cls(path, load_session_profile(path))

    def get_current_user(self) -> UserProfile:
        if self._profile is None:
            raise NoActiveSession("No user is signed in")
        return self._profile

    async def set_current_user(self, profile: UserProfile) -> None:
        await asyncio.to_thread(write_session_profile, profile=profile, output_path=self._path)
        self._profile = profile
        logger.debug("Session profile saved to %s", self._path)
