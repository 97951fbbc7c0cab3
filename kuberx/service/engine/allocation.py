"""
Salary Allocation for the KuberX Financial Reasoning Engine.

Recommends a four-way monthly split (essentials / investments /
savings / lifestyle) starting from a 50/20/20/10 base and applying
stacking adjustments:

- Emergency fund below target: savings +10, lifestyle -5, investments -5
- EMI burden above threshold: lifestyle -5, essentials +5
- Aggressive risk appetite: investments +5, lifestyle -5

Each bucket is rounded on its own; the buckets are not renormalised,
so their sum can differ from the salary by a few currency units.
"""

from typing import Dict, List, Tuple

from kuberx.domain.entities import FinancialProfile, RiskAppetite

from .models import AllocationRule, SalaryAllocation
from .rounding import guarded, round_half_up
from .settings import EngineSettings, engine_settings

# rule -> (percentage deltas, message)
ALLOCATION_ADJUSTMENTS: Dict[AllocationRule, Tuple[Dict[str, int], str]] = {
    AllocationRule.EMERGENCY_FUND_LOW: (
        {"savings": 10, "lifestyle": -5, "investments": -5},
        "Emergency fund is below 6 months; boosting savings.",
    ),
    AllocationRule.HIGH_EMI_BURDEN: (
        {"lifestyle": -5, "essentials": 5},
        "High EMI burden; reducing discretionary spending.",
    ),
    AllocationRule.AGGRESSIVE_RISK: (
        {"investments": 5, "lifestyle": -5},
        "Aggressive risk profile; higher investment allocation.",
    ),
}


def applicable_allocation_rules(
    profile: FinancialProfile,
    settings: EngineSettings = engine_settings,
) -> List[AllocationRule]:
    """
    Determine which adjustments apply to a profile, in application order.

    Args:
        profile: The user's financial profile
        settings: Engine settings (uses defaults if not provided)

    Returns:
        Fired rules in the order they are applied
    """
    rules = []

    emergency_months = profile.current_savings / guarded(profile.monthly_expenses)
    if emergency_months < settings.emergency_target_months:
        rules.append(AllocationRule.EMERGENCY_FUND_LOW)

    emi_ratio = profile.existing_emis / guarded(profile.monthly_salary)
    if emi_ratio > settings.emi_burden_threshold:
        rules.append(AllocationRule.HIGH_EMI_BURDEN)

    if profile.risk_appetite == RiskAppetite.AGGRESSIVE:
        rules.append(AllocationRule.AGGRESSIVE_RISK)

    return rules


def calculate_allocation_percentages(
    rules: List[AllocationRule],
    settings: EngineSettings = engine_settings,
) -> Dict[str, int]:
    """Apply the fired rules' deltas to the base split."""
    percentages = {
        "essentials": settings.allocation_essentials_pct,
        "investments": settings.allocation_investments_pct,
        "savings": settings.allocation_savings_pct,
        "lifestyle": settings.allocation_lifestyle_pct,
    }

    for rule in rules:
        deltas, _ = ALLOCATION_ADJUSTMENTS[rule]
        for bucket, delta in deltas.items():
            percentages[bucket] += delta

    return percentages


def calculate_salary_allocation(
    profile: FinancialProfile,
    settings: EngineSettings = engine_settings,
) -> SalaryAllocation:
    """
    Recommend how to split the monthly salary.

    Args:
        profile: The user's financial profile
        settings: Engine settings (uses defaults if not provided)

    Returns:
        SalaryAllocation with rounded buckets and the fired rules
    """
    rules = applicable_allocation_rules(profile, settings)
    percentages = calculate_allocation_percentages(rules, settings)
    salary = profile.monthly_salary

    return SalaryAllocation(
        essentials=round_half_up(salary * percentages["essentials"] / 100),
        investments=round_half_up(salary * percentages["investments"] / 100),
        savings=round_half_up(salary * percentages["savings"] / 100),
        lifestyle=round_half_up(salary * percentages["lifestyle"] / 100),
        fired_rules=tuple(rules),
        reasons=tuple(ALLOCATION_ADJUSTMENTS[rule][1] for rule in rules),
    )
