"""
Expense Summary and spending-leak detection.

Totals a list of expense entries by category and flags two common
leaks: food spending above 30% of all expenses, and subscriptions
above 2,000 a month.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from .models import EXPENSE_CATEGORIES, ExpenseEntry, ExpenseSummary

FOOD_SHARE_LIMIT = 0.3
SUBSCRIPTION_LIMIT = 2000


def total_by_category(entries: Iterable[ExpenseEntry]) -> Dict[str, float]:
    """Sum amounts per category, keeping only categories with spending."""
    totals: Dict[str, float] = defaultdict(float)
    for entry in entries:
        totals[entry.category] += entry.amount

    return {
        category: totals[category]
        for category in EXPENSE_CATEGORIES
        if totals.get(category, 0) > 0
    }


def detect_spending_leaks(category_totals: Dict[str, float], total: float) -> List[str]:
    leaks = []

    if category_totals.get("Food", 0) > total * FOOD_SHARE_LIMIT:
        leaks.append("Food delivery spending is over 30% of expenses")
    if category_totals.get("Subscriptions", 0) > SUBSCRIPTION_LIMIT:
        leaks.append("Subscription costs exceeding ₹2,000/month")

    return leaks


def summarize_expenses(entries: Iterable[ExpenseEntry]) -> ExpenseSummary:
    """
    Summarise expenses for display.

    Args:
        entries: Expense entries (already validated)

    Returns:
        ExpenseSummary with ordered category totals, total and leaks
    """
    entries = list(entries)
    category_totals = total_by_category(entries)
    total = sum(entry.amount for entry in entries)

    return ExpenseSummary(
        category_totals=tuple(category_totals.items()),
        total=total,
        leaks=tuple(detect_spending_leaks(category_totals, total)),
    )
