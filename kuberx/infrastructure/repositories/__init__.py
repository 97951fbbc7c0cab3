"""Repository implementations."""

from .memory_profile_repository import InMemoryProfileRepository
from .json_profile_repository import JsonFileProfileRepository

__all__ = [
    "InMemoryProfileRepository",
    "JsonFileProfileRepository",
]
