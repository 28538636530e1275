"""Validation rules for the profile form.

Two explicit passes:

1. per-field rules (`name`, `password`), each independent of the others;
2. one cross-field rule for `confirm_password`, applied only when a new
   password was typed.

A `confirm_password` typed without a new password is ignored and dropped from
the submission. Everything here is synchronous and side-effect free.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.domain import messages
from core.domain.errors import FieldError, FieldErrorCode, FieldErrors
from core.domain.models import FormPayload, ValidatedPayload

PASSWORD_MIN_LENGTH = 6


@dataclass
class ValidationResult:
    """Either a submission ready to send, or one error per offending field."""

    payload: ValidatedPayload | None = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.payload is not None and not self.errors


def _blank_to_none(value: str | None) -> str | None:
    return value if value else None


def check_name(name: str) -> FieldError | None:
    if not name.strip():
        return FieldError(FieldErrorCode.REQUIRED, messages.NAME_REQUIRED)
    return None


def check_password(password: str | None, *, min_length: int = PASSWORD_MIN_LENGTH) -> FieldError | None:
    if password and len(password) < min_length:
        return FieldError(
            FieldErrorCode.TOO_SHORT,
            messages.PASSWORD_TOO_SHORT.format(min_length=min_length),
        )
    return None


def check_password_confirmation(password: str | None, confirm_password: str | None) -> FieldError | None:
    """Cross-field rule; a no-op unless `password` is non-empty."""

    if not password:
        return None
    if not confirm_password:
        return FieldError(FieldErrorCode.REQUIRED, messages.CONFIRM_PASSWORD_REQUIRED)
    if confirm_password != password:
        return FieldError(FieldErrorCode.MISMATCH, messages.CONFIRM_PASSWORD_MISMATCH)
    return None


def validate_profile_form(
    payload: FormPayload,
    *,
    min_password_length: int = PASSWORD_MIN_LENGTH,
) -> ValidationResult:
    """Validate a form payload and build the submission.

    `email` is display-only and never checked nor submitted.
    """

    errors: FieldErrors = {}

    name_error = check_name(payload.name)
    if name_error:
        errors["name"] = name_error

    password = _blank_to_none(payload.password)
    password_error = check_password(password, min_length=min_password_length)
    if password_error:
        errors["password"] = password_error

    confirm_error = check_password_confirmation(password, _blank_to_none(payload.confirm_password))
    if confirm_error:
        errors["confirm_password"] = confirm_error

    if errors:
        return ValidationResult(errors=errors)

    if password is None:
        validated = ValidatedPayload(name=payload.name.strip())
    else:
        validated = ValidatedPayload(
            name=payload.name.strip(),
            old_password=_blank_to_none(payload.old_password),
            password=password,
            confirm_password=payload.confirm_password,
        )
    return ValidationResult(payload=validated)
