"""Unit tests for the expense summary and leak detection."""

from kuberx.service.engine import ExpenseEntry
from kuberx.service.engine.expenses import (
    detect_spending_leaks,
    summarize_expenses,
    total_by_category,
)


class TestExpenseEntry:
    """Tests for ExpenseEntry.validate()."""

    def test_valid_entry(self):
        assert ExpenseEntry(category="Food", amount=250, description="Lunch").validate() == []

    def test_unknown_category_and_bad_amount(self):
        errors = ExpenseEntry(category="Pets", amount=0).validate()

        assert "Unknown expense category: Pets" in errors
        assert "amount must be positive" in errors


class TestSummarizeExpenses:
    """Tests for summarize_expenses()."""

    def test_totals_follow_category_order(self):
        entries = [
            ExpenseEntry("Subscriptions", 500),
            ExpenseEntry("Food", 4000),
            ExpenseEntry("Transport", 2000),
            ExpenseEntry("Food", 1000),
        ]
        totals = total_by_category(entries)

        assert list(totals.items()) == [
            ("Food", 5000),
            ("Transport", 2000),
            ("Subscriptions", 500),
        ]

    def test_both_leaks(self):
        entries = [
            ExpenseEntry("Food", 5000),
            ExpenseEntry("Transport", 2000),
            ExpenseEntry("Subscriptions", 2500),
        ]
        summary = summarize_expenses(entries)

        assert summary.total == 9500
        assert summary.leaks == (
            "Food delivery spending is over 30% of expenses",
            "Subscription costs exceeding ₹2,000/month",
        )

    def test_no_leaks(self):
        summary = summarize_expenses([
            ExpenseEntry("Food", 1000),
            ExpenseEntry("Utilities", 5000),
        ])

        assert summary.leaks == ()
        assert summary.category_totals == (("Food", 1000), ("Utilities", 5000))

    def test_subscription_limit_is_exclusive(self):
        assert detect_spending_leaks({"Subscriptions": 2000}, 100000) == []

    def test_empty_list(self):
        summary = summarize_expenses([])

        assert summary.total == 0
        assert summary.category_totals == ()
        assert summary.leaks == ()
