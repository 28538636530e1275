"""Domain models and errors.

Pure, strict data structures (Pydantic v2). The domain knows nothing about
HTTP, the CLI or the filesystem, only about profiles, photos and form values.
"""
