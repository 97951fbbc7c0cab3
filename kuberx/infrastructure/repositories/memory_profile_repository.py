"""In-memory repository implementation for the session profile."""

from typing import Optional

from kuberx.domain.entities import FinancialProfile
from kuberx.domain.interfaces import ProfileRepository


class InMemoryProfileRepository(ProfileRepository):
    """Keeps the profile for the lifetime of the process."""

    def __init__(self, profile: Optional[FinancialProfile] = None):
        self._profile = profile

    def load_profile(self) -> Optional[FinancialProfile]:
        return self._profile

    def save_profile(self, profile: FinancialProfile) -> None:
        self._profile = profile

    def clear(self) -> None:
        self._profile = None
