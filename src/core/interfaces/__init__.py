"""Core interfaces.

Contracts (Protocol) implemented by concrete adapters, so the workflows depend
on abstractions rather than on HTTP clients, files or terminals.
"""

from core.interfaces.collaborators import (
    FileInspector,
    ImagePicker,
    Notifier,
    ProfileApi,
    SessionStore,
)

__all__ = [
    "FileInspector",
    "ImagePicker",
    "Notifier",
    "ProfileApi",
    "SessionStore",
]
