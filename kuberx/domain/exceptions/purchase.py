"""Purchase-related domain exceptions."""

from .base import DomainException


class InvalidPurchaseRequestException(DomainException):
    """Raised when a purchase evaluation request is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_PURCHASE_REQUEST",
        )


class PurchaseItemNotFoundException(DomainException):
    """Raised when a catalog item id does not exist."""

    def __init__(self, item_id: str):
        super().__init__(
            message=f"Purchase item not found: {item_id}",
            code="PURCHASE_ITEM_NOT_FOUND",
        )
        self.item_id = item_id


class InvalidExpenseException(DomainException):
    """Raised when an expense entry is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_EXPENSE",
        )
