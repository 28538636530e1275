"""User-facing messages of the profile screen.

English defaults; translation tables live outside the core.
"""

from __future__ import annotations

NAME_REQUIRED = "Enter your name."
PASSWORD_TOO_SHORT = "The new password must have at least {min_length} characters."
CONFIRM_PASSWORD_REQUIRED = "Confirm the new password."
CONFIRM_PASSWORD_MISMATCH = "The new password confirmation does not match."

PHOTO_TOO_LARGE = "This image is too large. Choose one up to {limit}MB."
PHOTO_UPDATED = "Photo updated!"
PHOTO_UPDATE_FAILED = "Could not update the photo. Please try again later."

PROFILE_UPDATED = "Profile updated successfully!"
PROFILE_UPDATE_FAILED = "Could not update your data. Please try again later."
