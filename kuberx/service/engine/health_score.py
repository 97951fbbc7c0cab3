"""
Financial Health Score for the onboarding flow.

A second, independently weighted score computed from an
OnboardingProfile. Five categories of 0-20 points each are averaged
(sum / 5), so the overall score tops out at 20 even though the status
bands run up to 75+. This mirrors the published score; see DESIGN.md.
"""

from typing import List

from kuberx.domain.entities import OnboardingProfile

from .models import (
    FinancialHealthScore,
    HealthCategoryScores,
    HealthColor,
    HealthStatus,
)
from .rounding import round_half_up

MAX_RECOMMENDATIONS = 3

# status -> (color, analysis, recommendations)
_STATUS_GUIDANCE = {
    HealthStatus.POOR: (
        HealthColor.RED,
        "Your financial health needs immediate attention. "
        "Focus on reducing expenses and building savings.",
        (
            "Create a strict monthly budget",
            "Reduce non-essential spending",
            "Build an emergency fund with at least 3 months of expenses",
        ),
    ),
    HealthStatus.FAIR: (
        HealthColor.YELLOW,
        "Your financial health is moderate. "
        "There's room for improvement in savings and investments.",
        (
            "Increase monthly savings rate",
            "Start an emergency fund if you haven't already",
            "Explore low-risk investment options",
        ),
    ),
    HealthStatus.GOOD: (
        HealthColor.GREEN,
        "Your financial health is good. Keep building on your strong foundation.",
        (
            "Diversify your investments",
            "Consider long-term wealth building strategies",
            "Maintain your expense discipline",
        ),
    ),
    HealthStatus.EXCELLENT: (
        HealthColor.EMERALD,
        "Your financial health is excellent. "
        "You're on track for long-term wealth building.",
        (
            "Explore advanced investment strategies",
            "Consider long-term financial planning",
            "Share your knowledge with others",
        ),
    ),
}


def score_income_stability(monthly_income: float) -> float:
    """Linear up to 20 points at 1,00,000 a month."""
    if monthly_income <= 0:
        return 0
    return min(20, (monthly_income / 100000) * 20)


def score_expense_control(monthly_income: float, monthly_expenses: float) -> int:
    if monthly_income <= 0:
        return 0

    expense_ratio = monthly_expenses / monthly_income
    if expense_ratio <= 0.5:
        return 20
    elif expense_ratio <= 0.65:
        return 15
    elif expense_ratio <= 0.8:
        return 10
    elif expense_ratio <= 1:
        return 5
    return 0


def score_savings_capacity(monthly_income: float, monthly_expenses: float) -> int:
    if monthly_income <= 0:
        return 0

    savings_rate = (monthly_income - monthly_expenses) / monthly_income * 100
    if savings_rate >= 40:
        return 20
    elif savings_rate >= 30:
        return 18
    elif savings_rate >= 20:
        return 15
    elif savings_rate >= 10:
        return 10
    elif savings_rate > 0:
        return 5
    return 0


def score_investment_activity(investment_count: int) -> int:
    if investment_count <= 0:
        return 0
    elif investment_count == 1:
        return 8
    elif investment_count == 2:
        return 12
    return 20


def score_debt_management(monthly_income: float, monthly_expenses: float) -> int:
    """
    Score the outgoings-to-income percentage.

    The onboarding profile has no EMI figure, so the ratio is taken over
    monthly expenses; zero income counts as a zero ratio.
    """
    ratio = monthly_expenses / monthly_income * 100 if monthly_income > 0 else 0

    if ratio == 0:
        return 20
    elif ratio <= 25:
        return 18
    elif ratio <= 40:
        return 15
    elif ratio <= 60:
        return 10
    elif ratio <= 80:
        return 5
    return 0


def classify_health_score(overall_score: int) -> HealthStatus:
    if overall_score < 20:
        return HealthStatus.POOR
    elif overall_score < 50:
        return HealthStatus.FAIR
    elif overall_score < 75:
        return HealthStatus.GOOD
    return HealthStatus.EXCELLENT


def calculate_category_scores(profile: OnboardingProfile) -> HealthCategoryScores:
    income = profile.monthly_income
    expenses = profile.monthly_expenses

    return HealthCategoryScores(
        income_stability=score_income_stability(income),
        expense_control=score_expense_control(income, expenses),
        savings_capacity=score_savings_capacity(income, expenses),
        investment_activity=score_investment_activity(len(profile.investments)),
        debt_management=score_debt_management(income, expenses),
    )


def build_recommendations(
    status: HealthStatus,
    category_scores: HealthCategoryScores,
) -> List[str]:
    """
    Status advice first, then category-deficiency advice, capped at 3.
    """
    recommendations = list(_STATUS_GUIDANCE[status][2])

    if category_scores.expense_control < 10:
        recommendations.append("Work on reducing your monthly expenses")
    if category_scores.savings_capacity < 10:
        recommendations.append("Try to save at least 10-20% of your monthly income")
    if category_scores.investment_activity < 10:
        recommendations.append("Start investing in SIPs or low-cost index funds")

    return recommendations[:MAX_RECOMMENDATIONS]


def calculate_financial_health_score(profile: OnboardingProfile) -> FinancialHealthScore:
    """
    Calculate the onboarding Financial Health Score.

    Args:
        profile: Profile captured during onboarding

    Returns:
        FinancialHealthScore with category points, status, colour,
        analysis and up to three recommendations
    """
    category_scores = calculate_category_scores(profile)
    overall_score = round_half_up(category_scores.total / 5)

    status = classify_health_score(overall_score)
    color, analysis, _ = _STATUS_GUIDANCE[status]

    return FinancialHealthScore(
        overall_score=overall_score,
        health_status=status,
        health_color=color,
        category_scores=category_scores,
        recommendations=tuple(build_recommendations(status, category_scores)),
        analysis=analysis,
    )
