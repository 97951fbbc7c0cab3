"""Repository interfaces for profile persistence."""

from abc import ABC, abstractmethod
from typing import Optional

from kuberx.domain.entities import FinancialProfile


class ProfileRepository(ABC):
    """
    Abstract repository for the active session's FinancialProfile.

    There is exactly one stored profile per session. Implementations
    may keep it in memory, in a local key-value file, etc.
    """

    @abstractmethod
    def load_profile(self) -> Optional[FinancialProfile]:
        """
        Retrieve the stored profile.

        Returns:
            The profile if one has been saved, None otherwise

        Raises:
            ProfileStorageException: If the stored snapshot cannot be decoded
        """
        ...

    @abstractmethod
    def save_profile(self, profile: FinancialProfile) -> None:
        """
        Persist a profile snapshot, replacing any previous one.

        Args:
            profile: The profile to save
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored profile (logout / storage reset)."""
        ...
