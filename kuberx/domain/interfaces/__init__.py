"""Domain Interfaces - Abstract contracts for infrastructure."""

from .repositories import ProfileRepository

__all__ = [
    "ProfileRepository",
]
