"""Error taxonomy of the profile workflows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AppError(Exception):
    """Known domain error: the server explained what went wrong.

    Raised by the remote-API adapter with the server's human-readable reason.
    The message is shown to the user verbatim.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class FileNotFound(Exception):
    """The selected file does not exist (anymore)."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"File not found: {uri}")
        self.uri = uri


class SizeLimitExceeded(Exception):
    """The selected image is larger than the upload limit."""

    def __init__(self, size_bytes: int, limit_bytes: int) -> None:
        super().__init__(f"Image has {size_bytes} bytes, limit is {limit_bytes}")
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes


class FieldErrorCode(str, Enum):
    REQUIRED = "required"
    TOO_SHORT = "too_short"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class FieldError:
    """Validation failure attached to one form field."""

    code: FieldErrorCode
    message: str


FieldErrors = dict[str, FieldError]


@dataclass(frozen=True)
class ClassifiedError:
    """A caught failure reduced to what the user should read.

    `known` is True when the message came from an `AppError`.
    """

    message: str
    known: bool
