"""Profile screen orchestration.

Form layer on top of the two workflows: it pre-fills the form from the session,
keeps field errors local (they never reach the network or the notifier) and
hands valid submissions to `ProfileUpdateWorkflow`. The CLI, or any other
front end, only talks to this class.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.config import AppSettings
from core.domain.errors import FieldErrors
from core.domain.models import FormPayload, UserProfile
from core.interfaces import FileInspector, ImagePicker, Notifier, ProfileApi, SessionStore
from core.services.photo_upload import PhotoUploadOutcome, PhotoUploadWorkflow
from core.services.profile_update import ProfileUpdateOutcome, ProfileUpdateWorkflow
from core.services.validation import validate_profile_form

logger = logging.getLogger(__name__)


@dataclass
class ProfileFormOutcome:
    """Result of a form submission.

    Exactly one of `field_errors` (validation failed, nothing was sent) or
    `update` (the workflow ran) is meaningful.
    """

    field_errors: FieldErrors = field(default_factory=dict)
    update: ProfileUpdateOutcome | None = None

    @property
    def ok(self) -> bool:
        return not self.field_errors and self.update is not None and self.update.ok


class ProfileEditor:
    def __init__(
        self,
        *,
        session: SessionStore,
        api: ProfileApi,
        picker: ImagePicker,
        inspector: FileInspector,
        notifier: Notifier,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._session = session
        self.profile_workflow = ProfileUpdateWorkflow(session=session, api=api, notifier=notifier)
        self.photo_workflow = PhotoUploadWorkflow(
            session=session,
            api=api,
            picker=picker,
            inspector=inspector,
            notifier=notifier,
            max_megabytes=self._settings.avatar_max_megabytes,
        )

    @property
    def current_user(self) -> UserProfile:
        return self._session.get_current_user()

    @property
    def is_busy(self) -> bool:
        return self.profile_workflow.is_updating or self.photo_workflow.is_loading

    def form_defaults(self) -> FormPayload:
        user = self.current_user
        return FormPayload(name=user.name, email=user.email)

    async def submit_form(self, payload: FormPayload) -> ProfileFormOutcome:
        result = validate_profile_form(payload, min_password_length=self._settings.password_min_length)
        if not result.ok:
            logger.debug("Profile form rejected: %s", ", ".join(sorted(result.errors)))
            return ProfileFormOutcome(field_errors=result.errors)

        assert result.payload is not None
        update = await self.profile_workflow.submit(result.payload, self.current_user)
        return ProfileFormOutcome(update=update)

    async def change_photo(self) -> PhotoUploadOutcome:
        return await self.photo_workflow.run()
