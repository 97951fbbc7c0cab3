"""
Data models for the financial reasoning engine.

Every result here is a derived value object: immutable, recomputed from
a FinancialProfile on demand and never persisted on its own.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class KuberStatus(str, Enum):
    """Qualitative band for the Kuber Score."""
    VULNERABLE = "Vulnerable"
    STABLE = "Stable"
    WEALTH_BUILDER = "Wealth Builder"


class HealthStatus(str, Enum):
    """Qualitative band for the Financial Health Score."""
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


class HealthColor(str, Enum):
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    EMERALD = "emerald"


class EmergencyCategory(str, Enum):
    """How long savings would cover expenses."""
    CRITICAL = "Critical"
    AT_RISK = "At Risk"
    SAFE = "Safe"
    EXCELLENT = "Excellent"


class AllocationRule(str, Enum):
    """Adjustments applied on top of the base salary split."""
    EMERGENCY_FUND_LOW = "emergency_fund_low"
    HIGH_EMI_BURDEN = "high_emi_burden"
    AGGRESSIVE_RISK = "aggressive_risk"


class Verdict(str, Enum):
    """Outcome of a purchase evaluation."""
    APPROVED = "Approved"
    DELAY_RECOMMENDED = "Delay Recommended"
    NOT_RECOMMENDED = "Not Recommended"


class PurchasePenalty(str, Enum):
    """Penalty rules that reduce a purchase's safety score."""
    EMERGENCY_FUND_DEPLETION = "emergency_fund_depletion"
    EXCEEDS_MONTHLY_SALARY = "exceeds_monthly_salary"
    HIGH_EMI_COMMITMENTS = "high_emi_commitments"
    LARGE_SHARE_OF_SAVINGS = "large_share_of_savings"


class FinancialImpact(str, Enum):
    """Size of a purchase relative to monthly salary."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class PurchaseType(str, Enum):
    ESSENTIAL = "essential"
    LIFESTYLE = "lifestyle"
    INVESTMENT = "investment"


class DepreciationLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class ImpactLevel(str, Enum):
    """Catalog-assigned impact tag (lower case, as stored in the catalog)."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class KuberScoreBreakdown:
    """
    The five Kuber Score components and their total.

    Attributes:
        savings_rate: Savings-rate component, 0-25
        emergency_fund_ratio: Emergency-fund component, 0-20
        debt_to_income_ratio: EMI burden component, 0-20
        investment_consistency: Investment component, 0-20
        expense_discipline: Expense-ratio component, 5, 10 or 15
        total: Composite score, 0-100
        status: Qualitative band derived from total
    """
    savings_rate: int
    emergency_fund_ratio: int
    debt_to_income_ratio: int
    investment_consistency: int
    expense_discipline: int
    total: int
    status: KuberStatus

    def to_dict(self) -> dict:
        return {
            "savingsRate": self.savings_rate,
            "emergencyFundRatio": self.emergency_fund_ratio,
            "debtToIncomeRatio": self.debt_to_income_ratio,
            "investmentConsistency": self.investment_consistency,
            "expenseDiscipline": self.expense_discipline,
            "total": self.total,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class HealthCategoryScores:
    """Per-category Financial Health Score points, each 0-20."""
    income_stability: float = 0
    expense_control: float = 0
    savings_capacity: float = 0
    investment_activity: float = 0
    debt_management: float = 0

    @property
    def total(self) -> float:
        return (
            self.income_stability
            + self.expense_control
            + self.savings_capacity
            + self.investment_activity
            + self.debt_management
        )


@dataclass(frozen=True)
class FinancialHealthScore:
    overall_score: int
    health_status: HealthStatus
    health_color: HealthColor
    category_scores: HealthCategoryScores
    recommendations: Tuple[str, ...]
    analysis: str


BALANCED_ALLOCATION_MESSAGE = "Balanced allocation based on your financial profile."


@dataclass(frozen=True)
class SalaryAllocation:
    """
    Recommended monthly salary split.

    Buckets are rounded independently, so their sum may drift from the
    salary by a few currency units.
    """
    essentials: int
    investments: int
    savings: int
    lifestyle: int
    fired_rules: Tuple[AllocationRule, ...] = ()
    reasons: Tuple[str, ...] = ()

    @property
    def total(self) -> int:
        return self.essentials + self.investments + self.savings + self.lifestyle

    @property
    def reasoning(self) -> str:
        if not self.reasons:
            return BALANCED_ALLOCATION_MESSAGE
        return " ".join(self.reasons)


@dataclass(frozen=True)
class EmergencySurvival:
    months: float
    category: EmergencyCategory


@dataclass(frozen=True)
class GoalScenario:
    """Required SIP for a goal under one assumed annual return."""
    label: str
    annual_return: float
    monthly_sip: int


@dataclass(frozen=True)
class GoalProjectionPoint:
    """Projected corpus at a year boundary, keyed by scenario label."""
    year: int
    values: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class WealthYear:
    """
    Wealth simulator output for one year.

    Attributes:
        year: 1-based year index
        invested: Cumulative contributions so far
        wealth: Nominal corpus at year end
        real_wealth: Corpus deflated to today's money
    """
    year: int
    invested: int
    wealth: int
    real_wealth: int


PURCHASE_SAFE_MESSAGE = "Purchase looks financially safe!"


@dataclass(frozen=True)
class PurchaseVerdict:
    """
    Result of the rule-based purchase check.

    Attributes:
        verdict: Approved, Delay Recommended or Not Recommended
        regret_probability: Heuristic 0-95 likelihood of regret
        score: Safety score after penalties (100 = no concerns)
        fired_penalties: Penalty rules that applied, in evaluation order
        reasons: Message for each fired penalty, same order
    """
    verdict: Verdict
    regret_probability: int
    score: int
    fired_penalties: Tuple[PurchasePenalty, ...] = ()
    reasons: Tuple[str, ...] = ()

    @property
    def reasoning(self) -> str:
        if not self.reasons:
            return PURCHASE_SAFE_MESSAGE
        return " ".join(self.reasons)


@dataclass(frozen=True)
class PurchaseItem:
    """A catalog entry describing a typical purchase."""
    id: str
    name: str
    average_price: int
    category: str
    type: PurchaseType
    depreciation_level: DepreciationLevel
    financial_impact: ImpactLevel


@dataclass(frozen=True)
class PurchaseCategory:
    id: str
    name: str
    items: Tuple[PurchaseItem, ...]


@dataclass(frozen=True)
class PurchaseAssessment:
    """
    Catalog-enriched purchase evaluation.

    The embedded verdict is exactly what should_i_buy() returns for the
    same price and profile; everything else is commentary.
    """
    verdict: PurchaseVerdict
    impact: FinancialImpact
    post_purchase_emergency: EmergencySurvival
    item: Optional[PurchaseItem] = None
    insights: Tuple[str, ...] = ()


EXPENSE_CATEGORIES = (
    "Food",
    "Transport",
    "Shopping",
    "Subscriptions",
    "Utilities",
    "Entertainment",
    "Health",
    "Other",
)


@dataclass(frozen=True)
class ExpenseEntry:
    category: str
    amount: float
    description: str = ""
    date: str = ""

    def validate(self) -> List[str]:
        errors = []

        if self.category not in EXPENSE_CATEGORIES:
            errors.append(f"Unknown expense category: {self.category}")
        if self.amount <= 0:
            errors.append("amount must be positive")

        return errors


@dataclass(frozen=True)
class ExpenseSummary:
    """Category totals (in display order), grand total and spending leaks."""
    category_totals: Tuple[Tuple[str, float], ...]
    total: float
    leaks: Tuple[str, ...] = ()
