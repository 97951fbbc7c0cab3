"""Data Transfer Objects for application layer."""

from .dashboard import DashboardSnapshot
from .projection import (
    GoalPlanRequest,
    GoalPlanResponse,
    WealthSimulationRequest,
    WealthSimulationResponse,
)
from .purchase import PurchaseRequest

__all__ = [
    "DashboardSnapshot",
    "GoalPlanRequest",
    "GoalPlanResponse",
    "WealthSimulationRequest",
    "WealthSimulationResponse",
    "PurchaseRequest",
]
