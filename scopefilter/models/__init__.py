"""Data models package."""

from .auth import SignedInUser

__all__ = ["SignedInUser"]
