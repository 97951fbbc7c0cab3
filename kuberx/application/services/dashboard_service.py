"""Dashboard service - runs the engine against the session profile."""

from typing import Iterable, Optional

import structlog

from kuberx.core.config import Settings, settings as default_settings
from kuberx.core.metrics import (
    record_kuber_score,
    record_purchase_verdict,
    track_evaluation_latency,
)
from kuberx.domain.exceptions import (
    InvalidExpenseException,
    InvalidHorizonException,
    InvalidProjectionRequestException,
    InvalidPurchaseRequestException,
)
from kuberx.application.dto import (
    DashboardSnapshot,
    GoalPlanRequest,
    GoalPlanResponse,
    PurchaseRequest,
    WealthSimulationRequest,
    WealthSimulationResponse,
)
from kuberx.service.engine import (
    EngineSettings,
    ExpenseEntry,
    ExpenseSummary,
    PurchaseAssessment,
    calculate_kuber_score,
    calculate_salary_allocation,
    emergency_survival_for,
    engine_settings,
    evaluate_purchase,
    get_purchase_item,
    plan_goal_scenarios,
    project_goal_trajectory,
    simulate_wealth,
    summarize_expenses,
    wealth_milestones,
)
from kuberx.service.engine.rounding import round_half_up

from .profile_service import ProfileService

logger = structlog.get_logger(__name__)

DEFAULT_SIP_SHARE = 0.2


class DashboardService:
    """
    Application service for the dashboard and its calculators.

    Every use case reads the profile once and derives all of its output
    from that snapshot.
    """

    def __init__(
        self,
        profile_service: ProfileService,
        rules: EngineSettings = engine_settings,
        app_settings: Settings = default_settings,
    ):
        self._profiles = profile_service
        self._rules = rules
        self._settings = app_settings

    def build_dashboard(self) -> DashboardSnapshot:
        """Compute the Kuber Score, salary split and emergency runway."""
        profile, onboarded = self._profiles.load()

        with track_evaluation_latency("dashboard"):
            kuber_score = calculate_kuber_score(profile, self._rules)
            allocation = calculate_salary_allocation(profile, self._rules)
            emergency = emergency_survival_for(profile)

        if self._settings.metrics_enabled:
            record_kuber_score(kuber_score.status.value)

        logger.info(
            "dashboard_built",
            onboarded=onboarded,
            kuber_total=kuber_score.total,
            kuber_status=kuber_score.status.value,
            allocation_rules=[rule.value for rule in allocation.fired_rules],
            emergency_category=emergency.category.value,
        )

        return DashboardSnapshot(
            profile=profile,
            onboarded=onboarded,
            kuber_score=kuber_score,
            allocation=allocation,
            emergency=emergency,
        )

    def evaluate_purchase(self, request: PurchaseRequest) -> PurchaseAssessment:
        """
        Evaluate a prospective purchase against the profile.

        Raises:
            InvalidPurchaseRequestException: If request validation fails
            PurchaseItemNotFoundException: If item_id is not in the catalog
        """
        errors = request.validate()
        if errors:
            raise InvalidPurchaseRequestException("; ".join(errors))

        item = get_purchase_item(request.item_id) if request.item_id else None
        price = request.item_price if request.item_price is not None else item.average_price
        profile = self._profiles.get_profile()

        log = logger.bind(
            item_id=request.item_id,
            item_name=request.item_name or (item.name if item else ""),
            item_price=price,
        )

        with track_evaluation_latency("purchase"):
            assessment = evaluate_purchase(price, profile, item, self._rules)

        if self._settings.metrics_enabled:
            record_purchase_verdict(assessment.verdict.verdict.value)

        log.info(
            "purchase_evaluated",
            verdict=assessment.verdict.verdict.value,
            regret_probability=assessment.verdict.regret_probability,
            penalties=[p.value for p in assessment.verdict.fired_penalties],
            impact=assessment.impact.value,
        )
        return assessment

    def plan_goal(self, request: GoalPlanRequest) -> GoalPlanResponse:
        """
        Work out the SIP each return scenario needs to reach a goal.

        Raises:
            InvalidHorizonException: If years is below 1
            InvalidProjectionRequestException: If another field is invalid
        """
        errors = request.validate()
        if request.years < 1:
            raise InvalidHorizonException(request.years)
        if errors:
            raise InvalidProjectionRequestException("; ".join(errors))

        savings = request.current_savings
        if savings is None:
            savings = self._profiles.get_profile().current_savings

        with track_evaluation_latency("goal_plan"):
            scenarios = plan_goal_scenarios(request.goal_amount, savings, request.years, self._rules)
            trajectory = project_goal_trajectory(
                request.goal_amount, savings, request.years, self._rules
            )

        logger.info(
            "goal_planned",
            goal_amount=request.goal_amount,
            years=request.years,
            sips={s.label: s.monthly_sip for s in scenarios},
        )

        return GoalPlanResponse(
            goal_amount=request.goal_amount,
            current_savings=savings,
            years=request.years,
            scenarios=scenarios,
            trajectory=trajectory,
        )

    def simulate_wealth(
        self,
        request: Optional[WealthSimulationRequest] = None,
    ) -> WealthSimulationResponse:
        """
        Project wealth growth for the profile's salary.

        Raises:
            InvalidHorizonException: If years is below 1
            InvalidProjectionRequestException: If another field is invalid
        """
        request = request or WealthSimulationRequest()
        errors = request.validate()
        if request.years < 1:
            raise InvalidHorizonException(request.years)
        if errors:
            raise InvalidProjectionRequestException("; ".join(errors))

        profile = self._profiles.get_profile()
        monthly_sip = request.monthly_sip
        if monthly_sip is None:
            monthly_sip = round_half_up(profile.monthly_salary * DEFAULT_SIP_SHARE)

        with track_evaluation_latency("wealth_simulation"):
            projection = simulate_wealth(
                profile.monthly_salary,
                request.annual_increment,
                monthly_sip,
                request.inflation_rate,
                request.years,
            )

        final = projection[-1]
        logger.info(
            "wealth_simulated",
            years=request.years,
            monthly_sip=monthly_sip,
            final_wealth=final.wealth,
            final_real_wealth=final.real_wealth,
        )

        return WealthSimulationResponse(
            monthly_sip=monthly_sip,
            projection=projection,
            milestones=wealth_milestones(projection),
        )

    def summarize_expenses(self, entries: Iterable[ExpenseEntry]) -> ExpenseSummary:
        """
        Total expenses by category and flag spending leaks.

        Raises:
            InvalidExpenseException: If any entry is invalid
        """
        entries = list(entries)
        for index, entry in enumerate(entries):
            errors = entry.validate()
            if errors:
                raise InvalidExpenseException(f"Expense {index}: " + "; ".join(errors))

        summary = summarize_expenses(entries)
        logger.info("expenses_summarized", count=len(entries), leaks=len(summary.leaks))
        return summary
