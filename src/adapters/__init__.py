"""Concrete implementations of the core collaborator contracts."""
