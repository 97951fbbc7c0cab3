"""
Financial Reasoning Engine for KuberX

Pure functions that turn a FinancialProfile into scores, allocations,
projections and purchase verdicts.
"""

from .settings import EngineSettings, engine_settings
from .models import (
    AllocationRule,
    EmergencyCategory,
    EmergencySurvival,
    ExpenseEntry,
    ExpenseSummary,
    FinancialHealthScore,
    FinancialImpact,
    GoalProjectionPoint,
    GoalScenario,
    HealthCategoryScores,
    HealthColor,
    HealthStatus,
    KuberScoreBreakdown,
    KuberStatus,
    PurchaseAssessment,
    PurchaseItem,
    PurchasePenalty,
    PurchaseVerdict,
    SalaryAllocation,
    Verdict,
    WealthYear,
)
from .kuber_score import calculate_kuber_score, explain_kuber_score
from .health_score import calculate_financial_health_score
from .allocation import calculate_salary_allocation
from .projections import (
    calculate_emergency_survival,
    calculate_goal_sip,
    emergency_survival_for,
    plan_goal_scenarios,
    project_goal_trajectory,
    simulate_wealth,
    wealth_milestones,
)
from .purchase import classify_financial_impact, evaluate_purchase, should_i_buy
from .catalog import (
    all_purchase_items,
    find_purchase_item,
    get_popular_purchases,
    get_purchase_item,
    get_purchases_by_category,
)
from .expenses import summarize_expenses
from .formatting import format_inr

__all__ = [
    # Settings
    "EngineSettings",
    "engine_settings",
    # Models
    "AllocationRule",
    "EmergencyCategory",
    "EmergencySurvival",
    "ExpenseEntry",
    "ExpenseSummary",
    "FinancialHealthScore",
    "FinancialImpact",
    "GoalProjectionPoint",
    "GoalScenario",
    "HealthCategoryScores",
    "HealthColor",
    "HealthStatus",
    "KuberScoreBreakdown",
    "KuberStatus",
    "PurchaseAssessment",
    "PurchaseItem",
    "PurchasePenalty",
    "PurchaseVerdict",
    "SalaryAllocation",
    "Verdict",
    "WealthYear",
    # Scores
    "calculate_kuber_score",
    "explain_kuber_score",
    "calculate_financial_health_score",
    # Allocation
    "calculate_salary_allocation",
    # Projections
    "calculate_emergency_survival",
    "calculate_goal_sip",
    "emergency_survival_for",
    "plan_goal_scenarios",
    "project_goal_trajectory",
    "simulate_wealth",
    "wealth_milestones",
    # Purchase
    "classify_financial_impact",
    "evaluate_purchase",
    "should_i_buy",
    # Catalog
    "all_purchase_items",
    "find_purchase_item",
    "get_popular_purchases",
    "get_purchase_item",
    "get_purchases_by_category",
    # Expenses
    "summarize_expenses",
    # Formatting
    "format_inr",
]
