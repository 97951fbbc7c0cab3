"""
Projection Functions for the KuberX Financial Reasoning Engine.

This module covers everything that looks forward in time:
- Emergency survival: how many months savings cover expenses
- Goal SIP: the monthly contribution needed to reach a target
- Goal scenarios and trajectories across assumed return rates
- Wealth simulation: year-by-year compounding of a growing SIP

Edge Cases:
- Zero expenses give zero survival months (no ratio), not infinity
- A goal horizon below one year is rejected with InvalidHorizonException
- A zero return rate falls back to simple division, no compounding
"""

from typing import Iterable, List

from kuberx.domain.entities import FinancialProfile
from kuberx.domain.exceptions import InvalidHorizonException

from .models import (
    EmergencyCategory,
    EmergencySurvival,
    GoalProjectionPoint,
    GoalScenario,
    WealthYear,
)
from .rounding import round_half_up, round_to_tenth
from .settings import EngineSettings, engine_settings

# Nominal annual return assumed by the wealth simulator
WEALTH_ANNUAL_RETURN = 0.12

DEFAULT_MILESTONE_YEARS = (5, 10, 20)


# =============================================================================
# Emergency Survival
# =============================================================================

def classify_emergency_months(months: float) -> EmergencyCategory:
    if months >= 12:
        return EmergencyCategory.EXCELLENT
    elif months >= 6:
        return EmergencyCategory.SAFE
    elif months >= 3:
        return EmergencyCategory.AT_RISK
    return EmergencyCategory.CRITICAL


def calculate_emergency_survival(savings: float, expenses: float) -> EmergencySurvival:
    """
    Calculate how long savings would last at the current burn rate.

    Args:
        savings: Liquid savings
        expenses: Monthly expenses

    Returns:
        EmergencySurvival with months (one decimal) and category
    """
    months = savings / expenses if expenses > 0 else 0
    # Categorise the unrounded figure
    return EmergencySurvival(
        months=round_to_tenth(months),
        category=classify_emergency_months(months),
    )


def emergency_survival_for(profile: FinancialProfile) -> EmergencySurvival:
    """Emergency survival for a profile's savings and expenses."""
    return calculate_emergency_survival(profile.current_savings, profile.monthly_expenses)


# =============================================================================
# Goal SIP
# =============================================================================

def _monthly_rate(annual_return: float) -> float:
    return annual_return / 12 / 100


def calculate_goal_sip(
    goal_amount: float,
    current_savings: float,
    years: float,
    annual_return: float,
) -> int:
    """
    Calculate the monthly SIP needed to reach a goal.

    Algorithm:
        1. Grow current savings at the monthly rate for the whole term
        2. remaining = goal - grown savings (never below 0)
        3. Solve the future value of an ordinary annuity for the payment:
           sip = remaining * r / ((1 + r)^months - 1)
           or remaining / months when r == 0

    Args:
        goal_amount: Target corpus
        current_savings: Lump sum already saved
        years: Time horizon in years (must be at least 1)
        annual_return: Expected annual return in percent (12 = 12%)

    Returns:
        Required monthly contribution, rounded to whole currency units

    Raises:
        InvalidHorizonException: If years is below 1
    """
    if years < 1:
        raise InvalidHorizonException(years)

    months = years * 12
    r = _monthly_rate(annual_return)

    future_value_of_current = current_savings * (1 + r) ** months
    remaining = max(goal_amount - future_value_of_current, 0)

    if r == 0:
        return round_half_up(remaining / months)

    sip = remaining * r / ((1 + r) ** months - 1)
    return round_half_up(sip)


def plan_goal_scenarios(
    goal_amount: float,
    current_savings: float,
    years: float,
    settings: EngineSettings = engine_settings,
) -> List[GoalScenario]:
    """
    Required SIP for a goal under each configured return scenario.

    Raises:
        InvalidHorizonException: If years is below 1
    """
    return [
        GoalScenario(
            label=label,
            annual_return=rate,
            monthly_sip=calculate_goal_sip(goal_amount, current_savings, years, rate),
        )
        for label, rate in settings.goal_scenarios
    ]


def project_goal_trajectory(
    goal_amount: float,
    current_savings: float,
    years: int,
    settings: EngineSettings = engine_settings,
) -> List[GoalProjectionPoint]:
    """
    Project the corpus at every year boundary from 0 to years.

    Each scenario contributes its own required SIP; the corpus at year y
    is the grown lump sum plus the future value of y * 12 contributions.

    Raises:
        InvalidHorizonException: If years is below 1
    """
    scenarios = plan_goal_scenarios(goal_amount, current_savings, years, settings)
    points = []

    for year in range(int(years) + 1):
        months = year * 12
        values = {}
        for scenario in scenarios:
            r = _monthly_rate(scenario.annual_return)
            grown_savings = current_savings * (1 + r) ** months
            if r > 0:
                sip_value = scenario.monthly_sip * (((1 + r) ** months - 1) / r)
            else:
                sip_value = scenario.monthly_sip * months
            values[scenario.label] = round_half_up(grown_savings + sip_value)
        points.append(GoalProjectionPoint(year=year, values=values))

    return points


# =============================================================================
# Wealth Simulation
# =============================================================================

def simulate_wealth(
    salary: float,
    annual_increment: float,
    monthly_sip: float,
    inflation_rate: float,
    years: int,
) -> List[WealthYear]:
    """
    Simulate SIP-driven wealth growth at a fixed 12% nominal return.

    Each month the SIP is added and the balance grows by 1%. At each year
    end the corpus is recorded in nominal and inflation-adjusted terms,
    then the SIP is stepped up by the annual increment.

    Args:
        salary: Current monthly salary (kept for call-site symmetry;
            the projection depends only on the SIP)
        annual_increment: Yearly SIP step-up in percent
        monthly_sip: Starting monthly contribution
        inflation_rate: Annual inflation in percent
        years: Number of years to simulate

    Returns:
        One WealthYear per simulated year, in order
    """
    monthly_growth = 1 + WEALTH_ANNUAL_RETURN / 12
    data = []
    total_invested = 0.0
    wealth = 0.0
    current_sip = monthly_sip

    for year in range(1, years + 1):
        for _ in range(12):
            total_invested += current_sip
            wealth = (wealth + current_sip) * monthly_growth

        real_wealth = wealth / (1 + inflation_rate / 100) ** year
        data.append(WealthYear(
            year=year,
            invested=round_half_up(total_invested),
            wealth=round_half_up(wealth),
            real_wealth=round_half_up(real_wealth),
        ))
        current_sip = round_half_up(current_sip * (1 + annual_increment / 100))

    return data


def wealth_milestones(
    projection: List[WealthYear],
    years: Iterable[int] = DEFAULT_MILESTONE_YEARS,
) -> List[WealthYear]:
    """Pick the rows for the requested years that the projection reaches."""
    by_year = {point.year: point for point in projection}
    return [by_year[year] for year in years if year in by_year]
