"""Name/password update workflow.

The session snapshot is only replaced after the server accepted the change,
and only `name` is mirrored locally: password fields are write-only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from core.domain import messages
from core.domain.errors import ClassifiedError
from core.domain.models import Severity, UserProfile, ValidatedPayload, merge_profile
from core.interfaces import Notifier, ProfileApi, SessionStore
from core.services.error_classifier import classify

logger = logging.getLogger(__name__)


class ProfileUpdateStatus(str, Enum):
    UPDATED = "updated"
    FAILED = "failed"
    BUSY = "busy"


@dataclass
class ProfileUpdateOutcome:
    status: ProfileUpdateStatus
    profile: UserProfile | None = None
    error: ClassifiedError | None = None

    @property
    def ok(self) -> bool:
        return self.status is ProfileUpdateStatus.UPDATED


class ProfileUpdateWorkflow:
    """Submit a validated profile change and merge it into the session.

    `is_updating` is set for the whole call and cleared on every path. While it
    is set, further submits are rejected with `ProfileUpdateStatus.BUSY`.
    """

    def __init__(self, *, session: SessionStore, api: ProfileApi, notifier: Notifier) -> None:
        self._session = session
        self._api = api
        self._notifier = notifier
        self.is_updating = False

    def _merge_base(self, submitted_for: UserProfile) -> UserProfile:
        """Latest session snapshot of the same user.

        Changes that landed while the update call was pending (e.g. a new
        avatar) are kept.
        """

        latest = self._session.get_current_user()
        return latest if latest.id == submitted_for.id else submitted_for

    async def submit(self, payload: ValidatedPayload, current_user: UserProfile) -> ProfileUpdateOutcome:
        if self.is_updating:
            logger.warning("Profile update already in progress; ignoring new submit")
            return ProfileUpdateOutcome(status=ProfileUpdateStatus.BUSY)

        self.is_updating = True
        try:
            logger.debug(
                "Submitting profile update for user %s (password change: %s)",
                current_user.id,
                payload.changes_password,
            )
            await self._api.update_profile(payload.to_request())

            updated = merge_profile(self._merge_base(current_user), name=payload.name)
            await self._session.set_current_user(updated)
            self._notifier.notify(messages.PROFILE_UPDATED, Severity.SUCCESS)
            return ProfileUpdateOutcome(status=ProfileUpdateStatus.UPDATED, profile=updated)
        except Exception as exc:
            classified = classify(exc, fallback=messages.PROFILE_UPDATE_FAILED)
            self._notifier.notify(classified.message, Severity.ERROR)
            return ProfileUpdateOutcome(status=ProfileUpdateStatus.FAILED, error=classified)
        finally:
            self.is_updating = False
