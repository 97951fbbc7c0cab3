"""Onboarding profile entity used by the newer onboarding flow."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .profile import FinancialProfile, RiskAppetite, currency_error


class Occupation(str, Enum):
    """How the user earns their income."""
    STUDENT = "student"
    SALARIED = "salaried"
    SELF_EMPLOYED = "self-employed"
    FREELANCER = "freelancer"


@dataclass(frozen=True)
class OnboardingProfile:
    """
    Profile captured by the multi-step onboarding wizard.

    Unlike FinancialProfile it records which investment instruments the
    user already holds, which feeds the Financial Health Score, and it
    carries no EMI figure.
    """
    full_name: str = ""
    age: int = 0
    occupation: Occupation = Occupation.SALARIED
    monthly_income: float = 0
    monthly_expenses: float = 0
    current_savings: float = 0
    investments: Tuple[str, ...] = ()
    risk_profile: Optional[RiskAppetite] = None
    financial_goals: Tuple[str, ...] = ()

    def validate(self) -> List[str]:
        errors = []

        for name in ("monthly_income", "monthly_expenses", "current_savings"):
            error = currency_error(name, getattr(self, name))
            if error:
                errors.append(error)

        return errors

    def to_financial_profile(self) -> FinancialProfile:
        """Map onto the dashboard profile consumed by the engine."""
        return FinancialProfile(
            name=self.full_name,
            age=self.age,
            monthly_salary=self.monthly_income,
            monthly_expenses=self.monthly_expenses,
            current_savings=self.current_savings,
            existing_emis=0,
            risk_appetite=self.risk_profile or RiskAppetite.BALANCED,
            financial_goals=frozenset(self.financial_goals),
        )
