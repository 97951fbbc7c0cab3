"""
Unit Tests for the Kuber Score.

These tests verify:
1. Each component's formula and caps
2. The total is summed before rounding and stays within 0-100
3. Status bands and custom thresholds
4. Zero-salary and deficit profiles never break the bounds
"""

import pytest

from kuberx.domain.entities import FinancialProfile
from kuberx.service.engine import EngineSettings, KuberStatus
from kuberx.service.engine.kuber_score import (
    calculate_kuber_score,
    calculate_savings_rate,
    classify_kuber_total,
    explain_kuber_score,
    score_debt_to_income,
    score_emergency_fund,
    score_expense_discipline,
    score_investment_consistency,
    score_savings_rate,
)


# =============================================================================
# Component Tests
# =============================================================================

class TestSavingsRate:
    """Tests for calculate_savings_rate() and score_savings_rate()."""

    def test_default_profile_saves_forty_percent(self, default_profile):
        assert calculate_savings_rate(default_profile) == 40.0

    def test_deficit_counts_as_zero(self, stretched_profile):
        """Spending above salary should not produce a negative rate."""
        assert calculate_savings_rate(stretched_profile) == 0.0

    def test_zero_salary_is_guarded(self):
        profile = FinancialProfile(monthly_salary=0, monthly_expenses=0)
        assert calculate_savings_rate(profile) == 0.0

    @pytest.mark.parametrize("rate,expected", [
        (0, 0),
        (20, 10),
        (50, 25),
        (100, 25),
    ])
    def test_score_is_half_point_per_percent_capped(self, rate, expected):
        assert score_savings_rate(rate) == expected


class TestEmergencyFundScore:
    """Tests for score_emergency_fund()."""

    def test_six_months_is_full_marks(self):
        profile = FinancialProfile(monthly_expenses=10000, current_savings=60000)
        assert score_emergency_fund(profile) == 20

    def test_scales_linearly_below_target(self):
        profile = FinancialProfile(monthly_expenses=10000, current_savings=30000)
        assert score_emergency_fund(profile) == pytest.approx(10)

    def test_custom_target_months(self):
        profile = FinancialProfile(monthly_expenses=10000, current_savings=30000)
        settings = EngineSettings(emergency_target_months=3)
        assert score_emergency_fund(profile, settings) == 20


class TestDebtAndDiscipline:
    """Tests for the EMI, investment and expense components."""

    def test_no_emis_is_full_marks(self, default_profile):
        assert score_debt_to_income(default_profile) == 20

    def test_emi_burden_loses_five_points_per_ten_percent(self):
        profile = FinancialProfile(monthly_salary=50000, existing_emis=10000)
        assert score_debt_to_income(profile) == pytest.approx(10)

    def test_emi_score_floors_at_zero(self, stretched_profile):
        assert score_debt_to_income(stretched_profile) == 0

    def test_investment_consistency_flat_above_twenty(self):
        assert score_investment_consistency(40) == 20
        assert score_investment_consistency(20) == 20
        assert score_investment_consistency(12.5) == 12.5

    @pytest.mark.parametrize("expenses,expected", [
        (20000, 15),
        (25000, 10),
        (34999, 10),
        (35000, 5),
        (60000, 5),
    ])
    def test_expense_discipline_bands(self, expenses, expected):
        profile = FinancialProfile(monthly_salary=50000, monthly_expenses=expenses)
        assert score_expense_discipline(profile) == expected


# =============================================================================
# Composite Score Tests
# =============================================================================

class TestCalculateKuberScore:
    """Tests for calculate_kuber_score()."""

    def test_default_profile(self, default_profile):
        """Components are rounded individually; the total uses raw values."""
        score = calculate_kuber_score(default_profile)

        assert score.savings_rate == 20
        assert score.emergency_fund_ratio == 11
        assert score.debt_to_income_ratio == 20
        assert score.investment_consistency == 20
        assert score.expense_discipline == 10
        # 20 + 11.11 + 20 + 20 + 10
        assert score.total == 81
        assert score.status == KuberStatus.WEALTH_BUILDER

    def test_healthy_profile_caps_at_hundred(self, healthy_profile):
        score = calculate_kuber_score(healthy_profile)

        assert score.total == 100
        assert score.status == KuberStatus.WEALTH_BUILDER

    def test_stable_profile(self):
        profile = FinancialProfile(
            monthly_salary=50000,
            monthly_expenses=40000,
            current_savings=60000,
            existing_emis=10000,
        )
        score = calculate_kuber_score(profile)

        # 10 + 5 + 10 + 20 + 5
        assert score.total == 50
        assert score.status == KuberStatus.STABLE

    def test_stretched_profile_stays_in_bounds(self, stretched_profile):
        score = calculate_kuber_score(stretched_profile)

        assert score.savings_rate == 0
        assert score.total == 5
        assert score.status == KuberStatus.VULNERABLE

    def test_zero_salary_does_not_raise(self):
        profile = FinancialProfile(
            monthly_salary=0,
            monthly_expenses=0,
            current_savings=0,
        )
        score = calculate_kuber_score(profile)

        assert score.total == 35
        assert score.status == KuberStatus.VULNERABLE

    @pytest.mark.parametrize("salary,expenses,savings,emis", [
        (1, 0, 0, 0),
        (10000, 50000, 0, 9000),
        (250000, 1000, 10_000_000, 0),
        (40000, 39999, 1, 39999),
    ])
    def test_total_is_always_within_bounds(self, salary, expenses, savings, emis):
        profile = FinancialProfile(
            monthly_salary=salary,
            monthly_expenses=expenses,
            current_savings=savings,
            existing_emis=emis,
        )
        score = calculate_kuber_score(profile)

        assert 0 <= score.savings_rate <= 25
        assert 0 <= score.total <= 100

    def test_same_profile_gives_same_score(self, default_profile):
        assert calculate_kuber_score(default_profile) == calculate_kuber_score(default_profile)

    def test_to_dict_uses_display_keys(self, default_profile):
        data = calculate_kuber_score(default_profile).to_dict()

        assert data["total"] == 81
        assert data["status"] == "Wealth Builder"
        assert data["emergencyFundRatio"] == 11


class TestKuberStatus:
    """Tests for classify_kuber_total()."""

    @pytest.mark.parametrize("total,expected", [
        (0, KuberStatus.VULNERABLE),
        (39, KuberStatus.VULNERABLE),
        (40, KuberStatus.STABLE),
        (69, KuberStatus.STABLE),
        (70, KuberStatus.WEALTH_BUILDER),
        (100, KuberStatus.WEALTH_BUILDER),
    ])
    def test_bands(self, total, expected):
        assert classify_kuber_total(total) == expected

    def test_custom_thresholds(self):
        settings = EngineSettings(kuber_stable_threshold=30, kuber_wealth_builder_threshold=90)

        assert classify_kuber_total(35, settings) == KuberStatus.STABLE
        assert classify_kuber_total(85, settings) == KuberStatus.STABLE


class TestExplainKuberScore:
    """Tests for explain_kuber_score()."""

    def test_explanation_mentions_total_and_surplus(self, default_profile):
        score = calculate_kuber_score(default_profile)
        text = explain_kuber_score(score, default_profile)

        assert "Kuber Score: 81/100 (Wealth Builder)" in text
        assert "₹20,000 saved each month" in text
        assert "Emergency fund: 11/20 (below target)" in text
        assert "no EMIs" in text

    def test_explanation_for_deficit(self, stretched_profile):
        score = calculate_kuber_score(stretched_profile)
        text = explain_kuber_score(score, stretched_profile)

        assert "no monthly surplus" in text
        assert "₹15,000 in EMIs each month" in text
