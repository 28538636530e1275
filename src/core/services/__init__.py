"""Workflows of the profile screen.

The form layer (`profile_editor`) validates input and drives the two
workflows (`profile_update`, `photo_upload`).
"""
