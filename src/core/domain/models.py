"""Domain models (Pydantic v2).

Notes:
- Snapshots are frozen: a profile change is a new value built with
  `merge_profile`, never an in-place edit of the session's object.
- Every external call gets an explicit result type (`PickResult`, `FileInfo`,
  `AvatarUpdateResponse`) instead of loosely shaped dicts.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

BYTES_PER_MEGABYTE = 1024 * 1024


class Severity(str, Enum):
    """Kind of user-facing notification."""

    SUCCESS = "success"
    ERROR = "error"


class UserProfile(BaseModel):
    """Profile of the signed-in user at a point in time."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Server-side identifier of the user.",
    )
    name: str = Field(
        ...,
        description="Display name.",
    )
    email: str = Field(
        ...,
        description="Account e-mail (display-only, never edited here).",
    )
    avatar: str | None = Field(
        default=None,
        description="Opaque server-assigned avatar reference (file name).",
    )


def merge_profile(snapshot: UserProfile, **changes: Any) -> UserProfile:
    """Return a new snapshot with the given fields replaced.

    The original snapshot is left untouched. Unknown field names raise
    `ValueError`.
    """

    unknown = set(changes) - set(UserProfile.model_fields)
    if unknown:
        raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}")
    return snapshot.model_copy(update=changes)


class FormPayload(BaseModel):
    """Raw values of the profile form, as typed by the user."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    old_password: str | None = Field(default=None, repr=False)
    password: str | None = Field(default=None, repr=False)
    confirm_password: str | None = Field(default=None, repr=False)


class ValidatedPayload(BaseModel):
    """Submission produced by a successful validation.

    Password fields are present only when a new password was given.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    old_password: str | None = Field(default=None, repr=False)
    password: str | None = Field(default=None, repr=False)
    confirm_password: str | None = Field(default=None, repr=False)

    @property
    def changes_password(self) -> bool:
        return bool(self.password)

    def to_request(self) -> dict[str, str]:
        """Body of the profile update call (absent fields are omitted)."""

        return self.model_dump(exclude_none=True)


class PickCancelled(BaseModel):
    """The user dismissed the image picker."""

    model_config = ConfigDict(frozen=True)

    cancelled: Literal[True] = True


class PickSelected(BaseModel):
    """The user selected an image."""

    model_config = ConfigDict(frozen=True)

    cancelled: Literal[False] = False
    uri: str = Field(..., min_length=1)
    mime_type_hint: str = Field(
        default="image",
        description="Media type reported by the picker ('image' or a full 'image/png').",
    )


PickResult = Union[PickCancelled, PickSelected]


class FileInfo(BaseModel):
    """Result of inspecting a local file."""

    model_config = ConfigDict(frozen=True)

    size_bytes: int = Field(..., ge=0)


class AvatarUpload(BaseModel):
    """Multipart `avatar` item sent to the remote API."""

    model_config = ConfigDict(frozen=True)

    uri: str
    name: str
    mime_type: str


class PendingPhoto(BaseModel):
    """Locally selected image, valid for a single upload attempt."""

    model_config = ConfigDict(frozen=True)

    uri: str
    extension: str
    mime_type: str
    size_bytes: int = Field(..., ge=0)
    name: str

    def to_upload(self) -> AvatarUpload:
        return AvatarUpload(uri=self.uri, name=self.name, mime_type=self.mime_type)


class AvatarUpdateResponse(BaseModel):
    """Only accepted success shape of the avatar update call."""

    model_config = ConfigDict(extra="ignore")

    avatar: str = Field(..., min_length=1)
