"""Data transfer objects for goal planning and wealth simulation."""

from dataclasses import dataclass
from typing import List, Optional

from kuberx.service.engine.models import GoalProjectionPoint, GoalScenario, WealthYear


@dataclass(frozen=True)
class GoalPlanRequest:
    """Input for the goal planner. Savings default to the stored profile's."""
    goal_amount: float
    years: int
    current_savings: Optional[float] = None

    def validate(self) -> List[str]:
        errors = []

        if self.goal_amount <= 0:
            errors.append("goal_amount must be positive")
        if self.years < 1:
            errors.append("years must be at least 1")
        if self.current_savings is not None and self.current_savings < 0:
            errors.append("current_savings must be non-negative")

        return errors


@dataclass(frozen=True)
class GoalPlanResponse:
    goal_amount: float
    current_savings: float
    years: int
    scenarios: List[GoalScenario]
    trajectory: List[GoalProjectionPoint]


@dataclass(frozen=True)
class WealthSimulationRequest:
    """
    Input for the wealth simulator.

    monthly_sip defaults to 20% of the stored profile's salary.
    """
    annual_increment: float = 10
    inflation_rate: float = 6
    years: int = 20
    monthly_sip: Optional[float] = None

    def validate(self) -> List[str]:
        errors = []

        if self.years < 1:
            errors.append("years must be at least 1")
        if self.monthly_sip is not None and self.monthly_sip < 0:
            errors.append("monthly_sip must be non-negative")
        if self.inflation_rate <= -100:
            errors.append("inflation_rate must be above -100")

        return errors


@dataclass(frozen=True)
class WealthSimulationResponse:
    monthly_sip: float
    projection: List[WealthYear]
    milestones: List[WealthYear]
