"""Projection-related domain exceptions."""

from .base import DomainException


class InvalidHorizonException(DomainException):
    """Raised when a projection is requested over an unusable time horizon."""

    def __init__(self, years: float):
        super().__init__(
            message=f"Time horizon must be at least 1 year, got {years}",
            code="INVALID_HORIZON",
        )
        self.years = years


class InvalidProjectionRequestException(DomainException):
    """Raised when a goal plan or wealth simulation request is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_PROJECTION_REQUEST",
        )
