"""Domain Entities - Core business objects."""

from .profile import DEFAULT_PROFILE, FinancialProfile, RiskAppetite
from .onboarding import OnboardingProfile, Occupation

__all__ = [
    "DEFAULT_PROFILE",
    "FinancialProfile",
    "RiskAppetite",
    "OnboardingProfile",
    "Occupation",
]
