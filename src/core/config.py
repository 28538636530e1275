"""Core configuration.

- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP, session file) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "profile-editor"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "profile-editor"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "profile-editor"
    return Path.home() / ".config" / "profile-editor"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# profile-editor user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Typed and validated at the edge (env vars) so workflows and adapters share
    a single configuration contract.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROFILE_EDITOR_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="http://localhost:3333",
        min_length=8,
        description="Base URL of the remote profile API.",
    )
    api_token: str | None = Field(
        default=None,
        description="Bearer token sent to the profile API (issued by the auth layer).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="profile-editor/0.1",
        min_length=1,
        description="User-Agent header for API requests.",
    )

    avatar_max_megabytes: float = Field(
        default=5.0,
        gt=0,
        description="Largest avatar accepted before upload (MB, 1 MB = 1024 * 1024 bytes).",
    )
    password_min_length: int = Field(
        default=6,
        ge=1,
        le=128,
        description="Minimum length for a new password.",
    )

    session_path: Path = Field(
        default_factory=lambda: get_user_config_dir() / "session.json",
        description="JSON file holding the signed-in user's profile snapshot.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ERROR).",
    )
