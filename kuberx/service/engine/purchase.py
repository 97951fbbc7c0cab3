"""
Purchase Evaluator ("Should I Buy") for the KuberX Financial Reasoning Engine.

A purchase starts with a safety score of 100 and loses points for each
concern it raises. All penalties are evaluated independently:

    Emergency fund drops below 3 months   -40
    Price exceeds one month's salary      -30
    EMIs already above 30% of salary      -20
    Price above 30% of savings            -10

Regret probability is the complement of the score, capped at 95.

Item price must be positive; callers validate that before evaluating.
"""

from typing import List, Optional, Tuple

from kuberx.domain.entities import FinancialProfile

from .formatting import format_inr
from .models import (
    DepreciationLevel,
    FinancialImpact,
    PurchaseAssessment,
    PurchaseItem,
    PurchasePenalty,
    PurchaseType,
    PurchaseVerdict,
    Verdict,
)
from .projections import calculate_emergency_survival
from .rounding import guarded
from .settings import EngineSettings, engine_settings

# penalty -> (points deducted, message)
PURCHASE_PENALTIES = {
    PurchasePenalty.EMERGENCY_FUND_DEPLETION: (
        40,
        "Purchase would reduce emergency fund below 3 months.",
    ),
    PurchasePenalty.EXCEEDS_MONTHLY_SALARY: (
        30,
        "Item costs more than one month's salary.",
    ),
    PurchasePenalty.HIGH_EMI_COMMITMENTS: (
        20,
        "Existing EMI commitments are high.",
    ),
    PurchasePenalty.LARGE_SHARE_OF_SAVINGS: (
        10,
        "Would use significant portion of savings.",
    ),
}

MIN_POST_PURCHASE_MONTHS = 3
SAVINGS_SHARE_LIMIT = 0.3


def applicable_purchase_penalties(
    item_price: float,
    profile: FinancialProfile,
    settings: EngineSettings = engine_settings,
) -> List[PurchasePenalty]:
    """
    Determine which penalties a purchase triggers, in evaluation order.

    Args:
        item_price: Price of the item
        profile: The user's financial profile
        settings: Engine settings (uses defaults if not provided)

    Returns:
        Fired penalties
    """
    savings = profile.current_savings
    expenses = guarded(profile.monthly_expenses)
    salary = guarded(profile.monthly_salary)

    penalties = []

    after_purchase_months = (savings - item_price) / expenses
    if after_purchase_months < MIN_POST_PURCHASE_MONTHS:
        penalties.append(PurchasePenalty.EMERGENCY_FUND_DEPLETION)

    if item_price / salary > 1:
        penalties.append(PurchasePenalty.EXCEEDS_MONTHLY_SALARY)

    if profile.existing_emis / salary > settings.emi_burden_threshold:
        penalties.append(PurchasePenalty.HIGH_EMI_COMMITMENTS)

    if item_price > savings * SAVINGS_SHARE_LIMIT:
        penalties.append(PurchasePenalty.LARGE_SHARE_OF_SAVINGS)

    return penalties


def classify_purchase_score(
    score: int,
    settings: EngineSettings = engine_settings,
) -> Verdict:
    if score >= settings.purchase_approve_threshold:
        return Verdict.APPROVED
    elif score >= settings.purchase_delay_threshold:
        return Verdict.DELAY_RECOMMENDED
    return Verdict.NOT_RECOMMENDED


def should_i_buy(
    item_price: float,
    profile: FinancialProfile,
    settings: EngineSettings = engine_settings,
) -> PurchaseVerdict:
    """
    Evaluate whether a purchase fits the user's finances.

    Args:
        item_price: Price of the item (must be positive)
        profile: The user's financial profile
        settings: Engine settings (uses defaults if not provided)

    Returns:
        PurchaseVerdict with verdict, regret probability and fired penalties
    """
    penalties = applicable_purchase_penalties(item_price, profile, settings)

    score = 100 - sum(PURCHASE_PENALTIES[p][0] for p in penalties)
    regret_probability = min(100 - score, settings.purchase_regret_cap)

    return PurchaseVerdict(
        verdict=classify_purchase_score(score, settings),
        regret_probability=regret_probability,
        score=score,
        fired_penalties=tuple(penalties),
        reasons=tuple(PURCHASE_PENALTIES[p][1] for p in penalties),
    )


def classify_financial_impact(item_price: float, monthly_salary: float) -> FinancialImpact:
    """High above 1.5 months of salary, Medium above half a month, else Low."""
    ratio = item_price / guarded(monthly_salary)
    if ratio > 1.5:
        return FinancialImpact.HIGH
    elif ratio > 0.5:
        return FinancialImpact.MEDIUM
    return FinancialImpact.LOW


def _item_insights(item: PurchaseItem) -> Tuple[str, ...]:
    insights = []

    if item.type == PurchaseType.INVESTMENT:
        insights.append(
            f"{item.name} is an investment-type purchase that can build long-term value."
        )
    if item.depreciation_level == DepreciationLevel.HIGH:
        insights.append(
            f"{item.name} loses value quickly; expect a low resale price."
        )

    return tuple(insights)


def evaluate_purchase(
    item_price: float,
    profile: FinancialProfile,
    item: Optional[PurchaseItem] = None,
    settings: EngineSettings = engine_settings,
) -> PurchaseAssessment:
    """
    Evaluate a purchase and add catalog-aware commentary.

    The verdict is computed by should_i_buy() and passed through unchanged;
    impact level, post-purchase runway and insights are additional context.

    Args:
        item_price: Price of the item (must be positive)
        profile: The user's financial profile
        item: Optional catalog entry the price was taken from
        settings: Engine settings (uses defaults if not provided)

    Returns:
        PurchaseAssessment wrapping the base verdict
    """
    verdict = should_i_buy(item_price, profile, settings)
    post_purchase = calculate_emergency_survival(
        profile.current_savings - item_price,
        profile.monthly_expenses,
    )

    insights = _item_insights(item) if item is not None else ()
    insights += (
        f"After spending {format_inr(item_price)}, your emergency fund would cover "
        f"{post_purchase.months} months ({post_purchase.category.value}).",
    )

    return PurchaseAssessment(
        verdict=verdict,
        impact=classify_financial_impact(item_price, profile.monthly_salary),
        post_purchase_emergency=post_purchase,
        item=item,
        insights=insights,
    )
