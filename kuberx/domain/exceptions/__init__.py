"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .profile import (
    InvalidProfileException,
    ProfileNotFoundException,
    ProfileStorageException,
)
from .projection import InvalidHorizonException, InvalidProjectionRequestException
from .purchase import (
    InvalidExpenseException,
    InvalidPurchaseRequestException,
    PurchaseItemNotFoundException,
)

__all__ = [
    "DomainException",
    "InvalidProfileException",
    "ProfileNotFoundException",
    "ProfileStorageException",
    "InvalidHorizonException",
    "InvalidProjectionRequestException",
    "InvalidExpenseException",
    "InvalidPurchaseRequestException",
    "PurchaseItemNotFoundException",
]
