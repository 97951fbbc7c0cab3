"""Data transfer objects for the dashboard view."""

from dataclasses import dataclass

from kuberx.domain.entities import FinancialProfile
from kuberx.service.engine.models import (
    EmergencySurvival,
    KuberScoreBreakdown,
    SalaryAllocation,
)


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the dashboard renders, derived from one profile read."""

    profile: FinancialProfile
    onboarded: bool
    kuber_score: KuberScoreBreakdown
    allocation: SalaryAllocation
    emergency: EmergencySurvival

    def to_dict(self) -> dict:
        """Convert to a plain structure for any renderer."""
        return {
            "profile": self.profile.to_dict(),
            "onboarded": self.onboarded,
            "kuberScore": self.kuber_score.to_dict(),
            "allocation": {
                "essentials": self.allocation.essentials,
                "investments": self.allocation.investments,
                "savings": self.allocation.savings,
                "lifestyle": self.allocation.lifestyle,
                "reasoning": self.allocation.reasoning,
            },
            "emergency": {
                "months": self.emergency.months,
                "category": self.emergency.category.value,
            },
        }
