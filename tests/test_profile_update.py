"""Unit tests for the name/password update workflow."""

import asyncio

import httpx
import pytest
from unittest.mock import AsyncMock

from core.domain.errors import AppError
from core.domain.models import Severity, ValidatedPayload
from core.services.profile_update import ProfileUpdateStatus, ProfileUpdateWorkflow


@pytest.fixture
def workflow(session, mock_api, mock_notifier):
    return ProfileUpdateWorkflow(session=session, api=mock_api, notifier=mock_notifier)


@pytest.fixture
def rename_payload():
    return ValidatedPayload(name="Jane Smith")


@pytest.fixture
def password_payload():
    return ValidatedPayload(
        name="Jane Smith",
        old_password="old-secret",
        password="secret1",
        confirm_password="secret1",
    )


class TestSubmit:
    @pytest.mark.asyncio
    async def test_success_merges_only_the_name(self, workflow, session, sample_user, password_payload, mock_notifier):
        outcome = await workflow.submit(password_payload, sample_user)

        assert outcome.ok
        saved = session.saved[-1]
        assert saved.name == "Jane Smith"
        assert saved.avatar == sample_user.avatar
        assert not hasattr(saved, "password")
        assert sample_user.name == "Jane Doe"
        mock_notifier.notify.assert_called_once_with("Profile updated successfully!", Severity.SUCCESS)

    @pytest.mark.asyncio
    async def test_sends_one_update_call_with_present_fields(self, workflow, sample_user, rename_payload, password_payload, mock_api):
        await workflow.submit(rename_payload, sample_user)
        mock_api.update_profile.assert_awaited_once_with({"name": "Jane Smith"})

        mock_api.update_profile.reset_mock()
        await workflow.submit(password_payload, sample_user)
        mock_api.update_profile.assert_awaited_once_with(
            {
                "name": "Jane Smith",
                "old_password": "old-secret",
                "password": "secret1",
                "confirm_password": "secret1",
            }
        )

    @pytest.mark.asyncio
    async def test_busy_flag_is_cleared_after_success(self, workflow, sample_user, rename_payload):
        await workflow.submit(rename_payload, sample_user)

        assert workflow.is_updating is False


class TestFailures:
    @pytest.mark.asyncio
    async def test_unrecognized_error_shows_fallback(self, workflow, session, sample_user, rename_payload, mock_api, mock_notifier):
        mock_api.update_profile.side_effect = RuntimeError("socket closed")

        outcome = await workflow.submit(rename_payload, sample_user)

        assert outcome.status is ProfileUpdateStatus.FAILED
        assert outcome.error.message == "Could not update your data. Please try again later."
        assert outcome.error.known is False
        mock_notifier.notify.assert_called_once_with(
            "Could not update your data. Please try again later.", Severity.ERROR
        )
        assert session.saved == []
        assert session.profile == sample_user
        assert workflow.is_updating is False

    @pytest.mark.asyncio
    async def test_server_reason_is_shown(self, workflow, session, sample_user, password_payload, mock_api, mock_notifier):
        mock_api.update_profile.side_effect = AppError("Old password does not match.", status_code=400)

        outcome = await workflow.submit(password_payload, sample_user)

        assert outcome.error.message == "Old password does not match."
        assert outcome.error.known is True
        mock_notifier.notify.assert_called_once_with("Old password does not match.", Severity.ERROR)
        assert session.saved == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [httpx.ConnectError("offline"), httpx.ReadTimeout("slow"), AppError("nope"), ValueError("bad json")],
    )
    async def test_busy_flag_is_always_cleared(self, workflow, sample_user, rename_payload, mock_api, error):
        mock_api.update_profile.side_effect = error

        await workflow.submit(rename_payload, sample_user)

        assert workflow.is_updating is False

    @pytest.mark.asyncio
    async def test_session_write_failure_is_classified(self, workflow, session, sample_user, rename_payload, mock_notifier):
        session.set_current_user = AsyncMock(side_effect=OSError("disk full"))

        outcome = await workflow.submit(rename_payload, sample_user)

        assert outcome.status is ProfileUpdateStatus.FAILED
        assert workflow.is_updating is False
        mock_notifier.notify.assert_called_once_with(
            "Could not update your data. Please try again later.", Severity.ERROR
        )


class TestSingleFlight:
    @pytest.mark.asyncio
    async def test_second_submit_is_rejected_while_pending(self, workflow, sample_user, rename_payload, mock_api):
        gate = asyncio.Event()

        async def slow_update(payload):
            await gate.wait()

        mock_api.update_profile = AsyncMock(side_effect=slow_update)

        first = asyncio.create_task(workflow.submit(rename_payload, sample_user))
        await asyncio.sleep(0)
        assert workflow.is_updating is True

        second = await workflow.submit(rename_payload, sample_user)
        gate.set()
        first_outcome = await first

        assert second.status is ProfileUpdateStatus.BUSY
        assert first_outcome.ok
        assert mock_api.update_profile.await_count == 1
        assert workflow.is_updating is False


class TestMergeBase:
    @pytest.mark.asyncio
    async def test_merges_onto_latest_snapshot_of_same_user(self, workflow, session, sample_user, rename_payload):
        session.profile = sample_user.model_copy(update={"avatar": "fresh.png"})

        outcome = await workflow.submit(rename_payload, sample_user)

        assert outcome.profile.avatar == "fresh.png"
        assert outcome.profile.name == "Jane Smith"

    @pytest.mark.asyncio
    async def test_other_session_user_is_not_used_as_base(self, workflow, session, sample_user, rename_payload):
        session.profile = sample_user.model_copy(update={"id": "someone-else", "avatar": "other.png"})

        outcome = await workflow.submit(rename_payload, sample_user)

        assert outcome.profile.id == sample_user.id
        assert outcome.profile.avatar == sample_user.avatar
