"""
Kuber Score Calculation for the KuberX Financial Reasoning Engine.

This module maps a FinancialProfile to a 0-100 composite score built
from five weighted components:

- Savings rate (0-25)
- Emergency fund coverage (0-20)
- Debt-to-income / EMI burden (0-20)
- Investment consistency (0-20)
- Expense discipline (5-15)

Components are reported rounded, but the total is computed from the
unrounded components, capped at 100 and only then rounded.
"""

from kuberx.domain.entities import FinancialProfile

from .formatting import format_inr
from .models import KuberScoreBreakdown, KuberStatus
from .rounding import guarded, round_half_up
from .settings import EngineSettings, engine_settings


def calculate_savings_rate(profile: FinancialProfile) -> float:
    """
    Percentage of salary left after expenses, bounded to 0-100.

    A zero salary is treated as a denominator of 1, and a deficit
    (expenses above salary) counts as a 0% savings rate.

    Args:
        profile: The user's financial profile

    Returns:
        Savings rate percentage (0-100)
    """
    salary = profile.monthly_salary
    rate = (salary - profile.monthly_expenses) / guarded(salary) * 100
    return max(0.0, min(rate, 100.0))


def score_savings_rate(savings_rate: float) -> float:
    """Half a point per percent saved, capped at 25."""
    return min(savings_rate * 0.5, 25)


def score_emergency_fund(
    profile: FinancialProfile,
    settings: EngineSettings = engine_settings,
) -> float:
    """
    Score savings coverage of monthly expenses (0-20).

    Full marks at the target number of months (6 by default).
    """
    emergency_months = profile.current_savings / guarded(profile.monthly_expenses)
    return min((emergency_months / settings.emergency_target_months) * 20, 20)


def score_debt_to_income(profile: FinancialProfile) -> float:
    """
    Score EMI burden (0-20).

    Loses 5 points per 10% of salary committed to EMIs, floored at 0.
    """
    dti_ratio = profile.existing_emis / guarded(profile.monthly_salary)
    return max(0, 20 - dti_ratio * 50)


def score_investment_consistency(savings_rate: float) -> float:
    """Savings rate counts point-for-point up to 20, then flat 20."""
    return 20 if savings_rate > 20 else savings_rate


def score_expense_discipline(profile: FinancialProfile) -> int:
    """15 below 50% of salary spent, 10 below 70%, otherwise 5."""
    expense_ratio = profile.monthly_expenses / guarded(profile.monthly_salary)
    if expense_ratio < 0.5:
        return 15
    elif expense_ratio < 0.7:
        return 10
    return 5


def classify_kuber_total(
    total: int,
    settings: EngineSettings = engine_settings,
) -> KuberStatus:
    if total < settings.kuber_stable_threshold:
        return KuberStatus.VULNERABLE
    elif total < settings.kuber_wealth_builder_threshold:
        return KuberStatus.STABLE
    return KuberStatus.WEALTH_BUILDER


def calculate_kuber_score(
    profile: FinancialProfile,
    settings: EngineSettings = engine_settings,
) -> KuberScoreBreakdown:
    """
    Calculate the Kuber Score for a profile.

    Args:
        profile: The user's financial profile
        settings: Engine settings (uses defaults if not provided)

    Returns:
        KuberScoreBreakdown with rounded components, total and status
    """
    savings_rate = calculate_savings_rate(profile)

    savings_rate_score = score_savings_rate(savings_rate)
    emergency_fund_score = score_emergency_fund(profile, settings)
    dti_score = score_debt_to_income(profile)
    investment_score = score_investment_consistency(savings_rate)
    expense_discipline_score = score_expense_discipline(profile)

    # Sum before rounding
    total = round_half_up(min(
        savings_rate_score
        + emergency_fund_score
        + dti_score
        + investment_score
        + expense_discipline_score,
        100,
    ))

    return KuberScoreBreakdown(
        savings_rate=round_half_up(savings_rate_score),
        emergency_fund_ratio=round_half_up(emergency_fund_score),
        debt_to_income_ratio=round_half_up(dti_score),
        investment_consistency=round_half_up(investment_score),
        expense_discipline=round_half_up(expense_discipline_score),
        total=total,
        status=classify_kuber_total(total, settings),
    )


def explain_kuber_score(
    breakdown: KuberScoreBreakdown,
    profile: FinancialProfile,
) -> str:
    """
    Generate a human-readable explanation of a Kuber Score.

    Args:
        breakdown: The score to explain
        profile: The profile it was computed from

    Returns:
        Multi-line explanation string
    """
    lines = [
        f"Kuber Score: {breakdown.total}/100 ({breakdown.status.value})",
        "",
        "Components:",
    ]

    surplus = profile.monthly_salary - profile.monthly_expenses
    if surplus <= 0:
        lines.append(f"  - Savings rate: {breakdown.savings_rate}/25 (no monthly surplus)")
    else:
        lines.append(
            f"  - Savings rate: {breakdown.savings_rate}/25 "
            f"({format_inr(surplus)} saved each month)"
        )

    if breakdown.emergency_fund_ratio >= 20:
        lines.append(f"  - Emergency fund: {breakdown.emergency_fund_ratio}/20 (fully funded)")
    else:
        lines.append(f"  - Emergency fund: {breakdown.emergency_fund_ratio}/20 (below target)")

    if profile.existing_emis == 0:
        lines.append(f"  - Debt burden: {breakdown.debt_to_income_ratio}/20 (no EMIs)")
    else:
        lines.append(
            f"  - Debt burden: {breakdown.debt_to_income_ratio}/20 "
            f"({format_inr(profile.existing_emis)} in EMIs each month)"
        )

    lines.append(f"  - Investment consistency: {breakdown.investment_consistency}/20")
    lines.append(f"  - Expense discipline: {breakdown.expense_discipline}/15")

    return "\n".join(lines)
