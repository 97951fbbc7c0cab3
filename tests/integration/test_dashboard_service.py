"""
Integration tests for DashboardService.

These tests run the engine end to end through the application layer,
with the profile served by an in-memory repository.
"""

import pytest
from structlog.testing import capture_logs

from kuberx.application.dto import GoalPlanRequest, PurchaseRequest, WealthSimulationRequest
from kuberx.domain.exceptions import (
    InvalidExpenseException,
    InvalidHorizonException,
    InvalidProjectionRequestException,
    InvalidPurchaseRequestException,
    PurchaseItemNotFoundException,
)
from kuberx.service.engine import (
    AllocationRule,
    EmergencyCategory,
    ExpenseEntry,
    FinancialImpact,
    KuberStatus,
    Verdict,
    should_i_buy,
)


# =============================================================================
# Dashboard Tests
# =============================================================================

class TestBuildDashboard:
    """Tests for DashboardService.build_dashboard()."""

    def test_default_profile_dashboard(self, dashboard_service, default_profile):
        snapshot = dashboard_service.build_dashboard()

        assert snapshot.onboarded is False
        assert snapshot.profile == default_profile
        assert snapshot.kuber_score.total == 81
        assert snapshot.kuber_score.status == KuberStatus.WEALTH_BUILDER
        assert snapshot.allocation.fired_rules == (AllocationRule.EMERGENCY_FUND_LOW,)
        assert snapshot.emergency.months == 3.3
        assert snapshot.emergency.category == EmergencyCategory.AT_RISK

    def test_dashboard_reflects_stored_profile(
        self,
        dashboard_service,
        profile_service,
        healthy_profile,
    ):
        profile_service.complete_onboarding(healthy_profile)
        snapshot = dashboard_service.build_dashboard()

        assert snapshot.onboarded is True
        assert snapshot.kuber_score.total == 100
        assert snapshot.emergency.category == EmergencyCategory.EXCELLENT

    def test_to_dict(self, dashboard_service):
        data = dashboard_service.build_dashboard().to_dict()

        assert data["kuberScore"]["status"] == "Wealth Builder"
        assert data["allocation"]["savings"] == 15000
        assert data["emergency"] == {"months": 3.3, "category": "At Risk"}

    def test_logs_dashboard_event(self, dashboard_service):
        with capture_logs() as logs:
            dashboard_service.build_dashboard()

        events = [log for log in logs if log["event"] == "dashboard_built"]
        assert len(events) == 1
        assert events[0]["kuber_total"] == 81


# =============================================================================
# Purchase Tests
# =============================================================================

class TestEvaluatePurchase:
    """Tests for DashboardService.evaluate_purchase()."""

    def test_explicit_price(self, dashboard_service, default_profile):
        assessment = dashboard_service.evaluate_purchase(PurchaseRequest(item_price=40000))

        assert assessment.verdict == should_i_buy(40000, default_profile)
        assert assessment.item is None

    def test_catalog_price_used_for_item_id(self, dashboard_service):
        assessment = dashboard_service.evaluate_purchase(PurchaseRequest(item_id="iphone"))

        assert assessment.item.id == "iphone"
        assert assessment.verdict.verdict == Verdict.NOT_RECOMMENDED
        assert assessment.verdict.regret_probability == 80
        assert assessment.impact == FinancialImpact.HIGH

    def test_explicit_price_overrides_catalog(self, dashboard_service):
        assessment = dashboard_service.evaluate_purchase(
            PurchaseRequest(item_price=5000, item_id="iphone")
        )

        assert assessment.verdict.verdict == Verdict.APPROVED

    @pytest.mark.parametrize("request_", [
        PurchaseRequest(),
        PurchaseRequest(item_price=0),
        PurchaseRequest(item_price=-100),
    ])
    def test_invalid_request(self, dashboard_service, request_):
        with pytest.raises(InvalidPurchaseRequestException):
            dashboard_service.evaluate_purchase(request_)

    def test_unknown_item(self, dashboard_service):
        with pytest.raises(PurchaseItemNotFoundException):
            dashboard_service.evaluate_purchase(PurchaseRequest(item_id="yacht"))


# =============================================================================
# Projection Tests
# =============================================================================

class TestPlanGoal:
    """Tests for DashboardService.plan_goal()."""

    def test_savings_default_to_profile(self, dashboard_service):
        response = dashboard_service.plan_goal(GoalPlanRequest(goal_amount=1000000, years=5))

        assert response.current_savings == 100000
        assert len(response.scenarios) == 3
        assert len(response.trajectory) == 6
        assert response.trajectory[0].values["Balanced"] == 100000

    def test_explicit_savings(self, dashboard_service):
        response = dashboard_service.plan_goal(
            GoalPlanRequest(goal_amount=120000, years=1, current_savings=0)
        )
        assert response.current_savings == 0

    def test_bad_horizon(self, dashboard_service):
        with pytest.raises(InvalidHorizonException):
            dashboard_service.plan_goal(GoalPlanRequest(goal_amount=100000, years=0))

    def test_bad_goal_amount(self, dashboard_service):
        with pytest.raises(InvalidProjectionRequestException, match="goal_amount"):
            dashboard_service.plan_goal(GoalPlanRequest(goal_amount=0, years=5))


class TestSimulateWealth:
    """Tests for DashboardService.simulate_wealth()."""

    def test_default_sip_is_fifth_of_salary(self, dashboard_service):
        response = dashboard_service.simulate_wealth()

        assert response.monthly_sip == 10000
        assert len(response.projection) == 20
        assert [m.year for m in response.milestones] == [5, 10, 20]
        assert response.projection[0].invested == 120000

    def test_explicit_sip(self, dashboard_service):
        response = dashboard_service.simulate_wealth(
            WealthSimulationRequest(annual_increment=0, inflation_rate=0, years=1, monthly_sip=1000)
        )

        assert response.projection[0].invested == 12000
        assert response.milestones == []

    def test_bad_horizon(self, dashboard_service):
        with pytest.raises(InvalidHorizonException):
            dashboard_service.simulate_wealth(WealthSimulationRequest(years=0))

    def test_negative_sip(self, dashboard_service):
        with pytest.raises(InvalidProjectionRequestException):
            dashboard_service.simulate_wealth(WealthSimulationRequest(monthly_sip=-1))


# =============================================================================
# Expense Tests
# =============================================================================

class TestSummarizeExpenses:
    """Tests for DashboardService.summarize_expenses()."""

    def test_summary(self, dashboard_service):
        summary = dashboard_service.summarize_expenses([
            ExpenseEntry("Food", 5000),
            ExpenseEntry("Subscriptions", 2500),
        ])

        assert summary.total == 7500
        assert len(summary.leaks) == 2

    def test_invalid_entry(self, dashboard_service):
        with pytest.raises(InvalidExpenseException, match="Expense 1"):
            dashboard_service.summarize_expenses([
                ExpenseEntry("Food", 100),
                ExpenseEntry("Food", -5),
            ])
