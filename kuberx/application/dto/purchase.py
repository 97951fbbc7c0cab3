"""Data transfer objects for purchase evaluation."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class PurchaseRequest:
    """
    Input for a "should I buy" evaluation.

    Either an explicit price or a catalog item id must be given; with
    only an item id the catalog's average price is used.
    """
    item_price: Optional[float] = None
    item_id: Optional[str] = None
    item_name: str = ""

    def validate(self) -> List[str]:
        errors = []

        if self.item_price is None:
            if not self.item_id:
                errors.append("item_price or item_id is required")
        elif self.item_price <= 0:
            errors.append("item_price must be positive")

        return errors
