"""
Shared fixtures for KuberX tests.

Provides:
- Representative financial profiles (default, healthy, stretched)
- In-memory and JSON-file profile repositories
- Profile and dashboard services wired to an in-memory repository
"""

import pytest

from kuberx.application.services import DashboardService, ProfileService
from kuberx.core.config import Settings
from kuberx.domain.entities import DEFAULT_PROFILE, FinancialProfile, RiskAppetite
from kuberx.infrastructure.repositories import (
    InMemoryProfileRepository,
    JsonFileProfileRepository,
)


# =============================================================================
# Profiles
# =============================================================================

@pytest.fixture
def default_profile() -> FinancialProfile:
    """Salary 50,000, expenses 30,000, savings 1,00,000, no EMIs."""
    return DEFAULT_PROFILE


@pytest.fixture
def healthy_profile() -> FinancialProfile:
    """Saves 60% of salary with a 15-month emergency fund."""
    return FinancialProfile(
        name="Asha",
        age=32,
        monthly_salary=100000,
        monthly_expenses=40000,
        current_savings=600000,
        existing_emis=0,
        risk_appetite=RiskAppetite.BALANCED,
        financial_goals=frozenset({"Retirement", "Emergency Fund"}),
    )


@pytest.fixture
def stretched_profile() -> FinancialProfile:
    """Spends more than it earns, no savings, heavy EMIs."""
    return FinancialProfile(
        name="Ravi",
        age=28,
        monthly_salary=30000,
        monthly_expenses=40000,
        current_savings=0,
        existing_emis=15000,
        risk_appetite=RiskAppetite.AGGRESSIVE,
    )


# =============================================================================
# Repositories and Services
# =============================================================================

@pytest.fixture
def app_settings(tmp_path) -> Settings:
    return Settings(
        profile_store_path=str(tmp_path / "storage.json"),
        metrics_enabled=True,
    )


@pytest.fixture
def memory_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def json_repository(tmp_path) -> JsonFileProfileRepository:
    return JsonFileProfileRepository(path=tmp_path / "storage.json")


@pytest.fixture
def profile_service(memory_repository, app_settings) -> ProfileService:
    return ProfileService(memory_repository, app_settings=app_settings)


@pytest.fixture
def dashboard_service(profile_service, app_settings) -> DashboardService:
    return DashboardService(profile_service, app_settings=app_settings)
