"""
Engine Settings for the KuberX Financial Reasoning Engine.

This module contains the tunable thresholds used by the scoring,
allocation and purchase rules. Defaults reproduce the published
KuberX behaviour exactly; they can be adjusted via environment
variables for experiments without touching the formulas.

Environment variables use the ENGINE_ prefix:
    ENGINE_KUBER_STABLE_THRESHOLD=40
    ENGINE_EMI_BURDEN_THRESHOLD=0.3
    ENGINE_PURCHASE_REGRET_CAP=95

Usage:
    from kuberx.service.engine.settings import engine_settings

    # Use default settings (loaded from env)
    cap = engine_settings.purchase_regret_cap

    # Or create custom settings for testing
    custom = EngineSettings(kuber_stable_threshold=35)
"""

import json
from functools import lru_cache
from typing import List, Tuple

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """
    Configurable parameters for the financial reasoning rules.

    All settings can be overridden via environment variables with ENGINE_ prefix.
    Percentages are whole numbers (20 = 20%).
    """

    model_config = SettingsConfigDict(
        env_prefix="ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Kuber Score Status ===
    kuber_stable_threshold: int = Field(
        default=40,
        ge=0,
        le=100,
        description="Kuber total below this is Vulnerable",
    )
    kuber_wealth_builder_threshold: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Kuber total at or above this is Wealth Builder",
    )

    # === Emergency Fund ===
    emergency_target_months: float = Field(
        default=6.0,
        gt=0.0,
        description="Months of expenses considered a complete emergency fund",
    )

    # === Salary Allocation ===
    allocation_essentials_pct: int = Field(default=50, ge=0, le=100)
    allocation_investments_pct: int = Field(default=20, ge=0, le=100)
    allocation_savings_pct: int = Field(default=20, ge=0, le=100)
    allocation_lifestyle_pct: int = Field(default=10, ge=0, le=100)
    emi_burden_threshold: float = Field(
        default=0.3,
        gt=0.0,
        description="EMI/salary ratio above this is considered a high debt burden",
    )

    # === Purchase Evaluation ===
    purchase_approve_threshold: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Safety score at or above this is Approved",
    )
    purchase_delay_threshold: int = Field(
        default=40,
        ge=0,
        le=100,
        description="Safety score at or above this (and below approve) is Delay Recommended",
    )
    purchase_regret_cap: int = Field(
        default=95,
        ge=0,
        le=100,
        description="Upper bound on reported regret probability",
    )

    # === Goal Scenarios ===
    goal_scenarios_json: str = Field(
        default='[["Conservative", 8], ["Balanced", 12], ["Aggressive", 15]]',
        description="Goal planner scenarios as JSON array: [[label, annual_return_pct], ...]",
    )

    @field_validator("goal_scenarios_json")
    @classmethod
    def validate_scenarios_json(cls, v: str) -> str:
        """Validate that scenarios JSON is parseable and well-formed."""
        try:
            scenarios = json.loads(v)
            if not isinstance(scenarios, list) or not scenarios:
                raise ValueError("Scenarios must be a non-empty list")
            for scenario in scenarios:
                if not isinstance(scenario, list) or len(scenario) != 2:
                    raise ValueError("Each scenario must be [label, annual_return_pct]")
                label, rate = scenario
                if not isinstance(label, str) or not label:
                    raise ValueError("Scenario label must be a non-empty string")
                if isinstance(rate, bool) or not isinstance(rate, (int, float)):
                    raise ValueError(f"Scenario rate must be a number: {rate!r}")
                if rate < 0:
                    raise ValueError(f"Scenario rate cannot be negative: {rate}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        return v

    @model_validator(mode="after")
    def validate_thresholds(self) -> "EngineSettings":
        """Cross-field checks: ordered cut points and a complete base split."""
        split = (
            self.allocation_essentials_pct
            + self.allocation_investments_pct
            + self.allocation_savings_pct
            + self.allocation_lifestyle_pct
        )
        if split != 100:
            raise ValueError(f"Base allocation must sum to 100, got {split}")
        if self.kuber_stable_threshold > self.kuber_wealth_builder_threshold:
            raise ValueError("kuber_stable_threshold exceeds kuber_wealth_builder_threshold")
        if self.purchase_delay_threshold > self.purchase_approve_threshold:
            raise ValueError("purchase_delay_threshold exceeds purchase_approve_threshold")
        return self

    @property
    def goal_scenarios(self) -> List[Tuple[str, float]]:
        """Goal planner scenarios as (label, annual return %) pairs."""
        return [tuple(scenario) for scenario in json.loads(self.goal_scenarios_json)]


@lru_cache
def get_engine_settings() -> EngineSettings:
    """Get cached engine settings instance."""
    return EngineSettings()


engine_settings = get_engine_settings()
