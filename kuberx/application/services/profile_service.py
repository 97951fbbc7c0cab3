"""Profile service - owns the active session's FinancialProfile."""

from typing import Any, Tuple

import structlog

from kuberx.core.config import Settings, settings as default_settings
from kuberx.core.metrics import record_profile_save
from kuberx.domain.entities import DEFAULT_PROFILE, FinancialProfile, OnboardingProfile
from kuberx.domain.exceptions import InvalidProfileException, ProfileNotFoundException
from kuberx.domain.interfaces import ProfileRepository
from kuberx.service.engine import FinancialHealthScore, calculate_financial_health_score

logger = structlog.get_logger(__name__)


class ProfileService:
    """
    Application service for profile lifecycle use cases.

    A session is "onboarded" once a profile has been stored. Before that,
    reads fall back to DEFAULT_PROFILE and edits are rejected.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        app_settings: Settings = default_settings,
    ):
        self._profile_repo = profile_repository
        self._settings = app_settings

    def get_profile(self) -> FinancialProfile:
        """Return the stored profile, or the default one before onboarding."""
        profile = self._profile_repo.load_profile()
        return profile if profile is not None else DEFAULT_PROFILE

    def load(self) -> Tuple[FinancialProfile, bool]:
        """
        Read the profile once and report whether it was stored.

        Returns:
            (profile, onboarded) from a single repository read
        """
        profile = self._profile_repo.load_profile()
        if profile is None:
            return DEFAULT_PROFILE, False
        return profile, True

    def is_onboarded(self) -> bool:
        return self._profile_repo.load_profile() is not None

    def require_profile(self) -> FinancialProfile:
        """
        Return the stored profile.

        Raises:
            ProfileNotFoundException: If onboarding has not been completed
        """
        profile = self._profile_repo.load_profile()
        if profile is None:
            logger.warning("profile_not_found", storage_key=self._settings.profile_storage_key)
            raise ProfileNotFoundException(self._settings.profile_storage_key)
        return profile

    def complete_onboarding(self, profile: FinancialProfile) -> FinancialProfile:
        """
        Store the profile collected by onboarding.

        Raises:
            InvalidProfileException: If the profile violates its invariants
        """
        self._save(profile)
        logger.info(
            "onboarding_completed",
            risk_appetite=profile.risk_appetite.value,
            goals=len(profile.financial_goals),
        )
        return profile

    def complete_guided_onboarding(
        self,
        onboarding_profile: OnboardingProfile,
    ) -> Tuple[FinancialProfile, FinancialHealthScore]:
        """
        Finish the multi-step onboarding flow.

        Stores the dashboard profile derived from the onboarding answers
        and returns it with the onboarding Financial Health Score.

        Raises:
            InvalidProfileException: If the onboarding answers are invalid
        """
        errors = onboarding_profile.validate()
        if errors:
            raise InvalidProfileException("; ".join(errors))

        health = calculate_financial_health_score(onboarding_profile)
        profile = self.complete_onboarding(onboarding_profile.to_financial_profile())

        logger.info(
            "health_score_calculated",
            overall_score=health.overall_score,
            health_status=health.health_status.value,
        )
        return profile, health

    def update_profile(self, **changes: Any) -> FinancialProfile:
        """
        Apply field edits to the stored profile.

        Raises:
            ProfileNotFoundException: If onboarding has not been completed
            InvalidProfileException: If the edited profile is invalid
        """
        current = self.require_profile()
        updated = current.with_updates(**changes)
        self._save(updated)

        logger.info("profile_updated", fields=sorted(changes))
        return updated

    def reset(self) -> None:
        """Forget the stored profile (logout / storage clear)."""
        self._profile_repo.clear()
        logger.info("profile_reset")

    def _save(self, profile: FinancialProfile) -> None:
        errors = profile.validate()
        if errors:
            raise InvalidProfileException("; ".join(errors))

        self._profile_repo.save_profile(profile)
        if self._settings.metrics_enabled:
            record_profile_save()
