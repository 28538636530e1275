"""Avatar selection and upload workflow.

States (success path)::

    IDLE -> SELECTING -> SIZE_CHECKING -> UPLOADING -> MERGING -> IDLE

A dismissed picker goes straight back to IDLE without notifying anyone. Any
failure is classified, surfaced through the notifier and also ends in IDLE.
The size check always runs before the upload, so an oversized image never
reaches the network.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from urllib.parse import unquote, urlparse

from core.domain import messages
from core.domain.errors import SizeLimitExceeded
from core.domain.models import (
    BYTES_PER_MEGABYTE,
    AvatarUpdateResponse,
    FileInfo,
    PendingPhoto,
    PickSelected,
    Severity,
    UserProfile,
    merge_profile,
)
from core.interfaces import FileInspector, ImagePicker, Notifier, ProfileApi, SessionStore
from core.services.error_classifier import classify

logger = logging.getLogger(__name__)

DEFAULT_MAX_MEGABYTES = 5.0
DEFAULT_EXTENSION = "jpg"


class PhotoState(str, Enum):
    IDLE = "idle"
    SELECTING = "selecting"
    SIZE_CHECKING = "size_checking"
    UPLOADING = "uploading"
    MERGING = "merging"


class PhotoUploadStatus(str, Enum):
    UPDATED = "updated"
    CANCELLED = "cancelled"
    TOO_LARGE = "too_large"
    FAILED = "failed"
    BUSY = "busy"


@dataclass
class PhotoUploadOutcome:
    """Result of one `PhotoUploadWorkflow.run` call."""

    status: PhotoUploadStatus
    profile: UserProfile | None = None
    message: str | None = None


def infer_extension(uri: str) -> str:
    """Lower-case file extension of `uri` (without the dot)."""

    path = unquote(urlparse(uri).path) or uri
    suffix = PurePosixPath(path.replace("\\", "/")).suffix
    return suffix[1:].lower() if suffix else DEFAULT_EXTENSION


def infer_mime_type(hint: str, extension: str) -> str:
    if "/" in hint:
        return hint
    subtype = "jpeg" if extension == "jpg" else extension
    return f"{hint or 'image'}/{subtype}"


def build_pending_photo(selection: PickSelected, info: FileInfo, *, owner_name: str) -> PendingPhoto:
    """Describe the selected image for upload; the file is named after its owner."""

    extension = infer_extension(selection.uri)
    return PendingPhoto(
        uri=selection.uri,
        extension=extension,
        mime_type=infer_mime_type(selection.mime_type_hint, extension),
        size_bytes=info.size_bytes,
        name=f"{owner_name}.{extension}".lower(),
    )


class PhotoUploadWorkflow:
    """Pick, check, upload and merge a new avatar.

    `is_loading` is True while a run is in progress; a second `run` issued in
    the meantime is rejected with `PhotoUploadStatus.BUSY`.
    """

    def __init__(
        self,
        *,
        session: SessionStore,
        api: ProfileApi,
        picker: ImagePicker,
        inspector: FileInspector,
        notifier: Notifier,
        max_megabytes: float = DEFAULT_MAX_MEGABYTES,
    ) -> None:
        self._session = session
        self._api = api
        self._picker = picker
        self._inspector = inspector
        self._notifier = notifier
        self._max_megabytes = max_megabytes
        self.state = PhotoState.IDLE
        self.is_loading = False

    @property
    def limit_bytes(self) -> int:
        return int(self._max_megabytes * BYTES_PER_MEGABYTE)

    def _enter(self, state: PhotoState) -> None:
        logger.debug("Photo workflow: %s -> %s", self.state.value, state.value)
        self.state = state

    async def run(self) -> PhotoUploadOutcome:
        if self.is_loading:
            logger.warning("Photo upload already in progress; ignoring new request")
            return PhotoUploadOutcome(status=PhotoUploadStatus.BUSY)

        self.is_loading = True
        try:
            return await self._run()
        except SizeLimitExceeded as exc:
            logger.info("Rejected avatar of %d bytes (limit %d)", exc.size_bytes, exc.limit_bytes)
            message = messages.PHOTO_TOO_LARGE.format(limit=f"{self._max_megabytes:g}")
            self._notifier.notify(message, Severity.ERROR)
            return PhotoUploadOutcome(status=PhotoUploadStatus.TOO_LARGE, message=message)
        except Exception as exc:
            classified = classify(exc, fallback=messages.PHOTO_UPDATE_FAILED)
            self._notifier.notify(classified.message, Severity.ERROR)
            return PhotoUploadOutcome(status=PhotoUploadStatus.FAILED, message=classified.message)
        finally:
            self._enter(PhotoState.IDLE)
            self.is_loading = False

    async def _run(self) -> PhotoUploadOutcome:
        self._enter(PhotoState.SELECTING)
        selection = await self._picker.pick_image()
        if not isinstance(selection, PickSelected):
            logger.debug("Image picker dismissed")
            return PhotoUploadOutcome(status=PhotoUploadStatus.CANCELLED)

        self._enter(PhotoState.SIZE_CHECKING)
        info = await self._inspector.stat_file(selection.uri)
        if info.size_bytes > self.limit_bytes:
            raise SizeLimitExceeded(info.size_bytes, self.limit_bytes)

        self._enter(PhotoState.UPLOADING)
        owner = self._session.get_current_user()
        photo = build_pending_photo(selection, info, owner_name=owner.name)
        body = await self._api.update_avatar(photo.to_upload())
        response = AvatarUpdateResponse.model_validate(body)

        self._enter(PhotoState.MERGING)
        updated = merge_profile(self._session.get_current_user(), avatar=response.avatar)
        await self._session.set_current_user(updated)

        self._notifier.notify(messages.PHOTO_UPDATED, Severity.SUCCESS)
        return PhotoUploadOutcome(status=PhotoUploadStatus.UPDATED, profile=updated)
