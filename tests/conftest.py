"""Shared test fixtures for the profile editor tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from core.domain.models import FileInfo, PickSelected, UserProfile


class FakeSession:
    """In-memory session that records every snapshot it receives."""

    def __init__(self, profile):
        self.profile = profile
        self.saved = []

    def get_current_user(self):
        return self.profile

    async def set_current_user(self, profile):
        self.saved.append(profile)
        self.profile = profile


@pytest.fixture
def sample_user():
    return UserProfile(id="u123", name="Jane Doe", email="jane@example.com", avatar="old.png")


@pytest.fixture
def session(sample_user):
    return FakeSession(sample_user)


@pytest.fixture
def mock_api():
    api = AsyncMock()
    api.update_avatar = AsyncMock(return_value={"avatar": "u123.png"})
    api.update_profile = AsyncMock(return_value=None)
    return api


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.notify = MagicMock()
    return notifier


@pytest.fixture
def mock_picker():
    picker = AsyncMock()
    picker.pick_image = AsyncMock(
        return_value=PickSelected(uri="file:///photos/me.PNG", mime_type_hint="image")
    )
    return picker


@pytest.fixture
def mock_inspector():
    inspector = AsyncMock()
    inspector.stat_file = AsyncMock(return_value=FileInfo(size_bytes=2_097_152))
    return inspector
