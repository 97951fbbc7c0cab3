"""Application Services - Use case orchestration."""

from .dashboard_service import DashboardService
from .profile_service import ProfileService

__all__ = [
    "DashboardService",
    "ProfileService",
]
