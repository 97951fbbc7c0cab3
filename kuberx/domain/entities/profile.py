"""Financial profile entity - the input record for every engine calculation."""

import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, FrozenSet, List, Optional

from kuberx.domain.exceptions import InvalidProfileException


class RiskAppetite(str, Enum):
    """How much investment volatility the user is comfortable with."""
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"


# Snapshot keys as written to the key-value store
_SNAPSHOT_KEYS = {
    "name": "name",
    "age": "age",
    "monthly_salary": "monthlySalary",
    "monthly_expenses": "monthlyExpenses",
    "current_savings": "currentSavings",
    "existing_emis": "existingEMIs",
    "risk_appetite": "riskAppetite",
    "financial_goals": "financialGoals",
}

_CURRENCY_FIELDS = (
    "monthly_salary",
    "monthly_expenses",
    "current_savings",
    "existing_emis",
)


@dataclass(frozen=True)
class FinancialProfile:
    """
    A user's financial snapshot.

    Profiles are immutable: edits produce a new instance via
    with_updates(), so derived values can never observe a
    half-applied change.

    Attributes:
        name: Display name
        age: Age in years
        monthly_salary: Take-home monthly salary
        monthly_expenses: Recurring monthly expenses
        current_savings: Liquid savings available today
        existing_emis: Monthly EMI (loan installment) obligations
        risk_appetite: Investment risk preference
        financial_goals: Free-text goal labels, order irrelevant
    """
    name: str = ""
    age: int = 25
    monthly_salary: float = 50000
    monthly_expenses: float = 30000
    current_savings: float = 100000
    existing_emis: float = 0
    risk_appetite: RiskAppetite = RiskAppetite.BALANCED
    financial_goals: FrozenSet[str] = field(
        default_factory=lambda: frozenset({"Emergency Fund"})
    )

    def validate(self) -> List[str]:
        errors = []

        for name in _CURRENCY_FIELDS:
            error = currency_error(name, getattr(self, name))
            if error:
                errors.append(error)

        if isinstance(self.age, bool) or not isinstance(self.age, int):
            errors.append("age must be an integer")
        elif self.age < 0:
            errors.append("age must be non-negative")

        return errors

    def with_updates(self, **changes: Any) -> "FinancialProfile":
        """Return a copy with the given fields replaced."""
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise InvalidProfileException(
                f"Unknown profile fields: {', '.join(sorted(unknown))}"
            )

        if "risk_appetite" in changes:
            changes["risk_appetite"] = _parse_risk_appetite(changes["risk_appetite"])
        if "financial_goals" in changes:
            changes["financial_goals"] = frozenset(changes["financial_goals"])

        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to the stored snapshot format."""
        return {
            "name": self.name,
            "age": self.age,
            "monthlySalary": self.monthly_salary,
            "monthlyExpenses": self.monthly_expenses,
            "currentSavings": self.current_savings,
            "existingEMIs": self.existing_emis,
            "riskAppetite": self.risk_appetite.value,
            "financialGoals": sorted(self.financial_goals),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FinancialProfile":
        """
        Rebuild a profile from a stored snapshot.

        Raises:
            InvalidProfileException: If a key is missing, has the wrong type,
                or holds a value the profile does not allow
        """
        if not isinstance(data, dict):
            raise InvalidProfileException("Profile snapshot must be an object")

        missing = [key for key in _SNAPSHOT_KEYS.values() if key not in data]
        if missing:
            raise InvalidProfileException(
                f"Profile snapshot is missing keys: {', '.join(missing)}"
            )

        for attr in _CURRENCY_FIELDS:
            value = data[_SNAPSHOT_KEYS[attr]]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidProfileException(f"{_SNAPSHOT_KEYS[attr]} must be a number")

        if isinstance(data["age"], bool) or not isinstance(data["age"], int):
            raise InvalidProfileException("age must be an integer")

        goals = data["financialGoals"]
        if not isinstance(goals, list) or not all(isinstance(g, str) for g in goals):
            raise InvalidProfileException("financialGoals must be a list of strings")

        profile = cls(
            name=str(data["name"]),
            age=data["age"],
            monthly_salary=data["monthlySalary"],
            monthly_expenses=data["monthlyExpenses"],
            current_savings=data["currentSavings"],
            existing_emis=data["existingEMIs"],
            risk_appetite=_parse_risk_appetite(data["riskAppetite"]),
            financial_goals=frozenset(goals),
        )

        errors = profile.validate()
        if errors:
            raise InvalidProfileException("; ".join(errors))
        return profile


def currency_error(name: str, value: Any) -> Optional[str]:
    """Describe why a currency amount is unusable, or None if it is fine."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return f"{name} must be a number"
    if not math.isfinite(value):
        return f"{name} must be finite"
    if value < 0:
        return f"{name} must be non-negative"
    return None


def _parse_risk_appetite(value: Any) -> RiskAppetite:
    try:
        return RiskAppetite(value)
    except ValueError:
        raise InvalidProfileException(f"Unknown risk appetite: {value!r}")


DEFAULT_PROFILE = FinancialProfile()
